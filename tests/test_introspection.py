from prom_composite import CompositeMetric, metric


class ServiceMetrics(CompositeMetric):
    jobs = metric("counter", "jobs_processed", "Jobs processed")
    queue = metric("gauge_vec", "queue_depth", "Queue depth", labels=["queue", "shard"])
    latency = metric("histogram", "job_seconds", "Job latency", buckets=[0.1, 0.5])
    default_hist = metric("histogram", "job_default_seconds", "Job latency (default buckets)")


def test_inventory_in_declaration_order(registry):
    inv = ServiceMetrics.register(registry).inventory()
    assert [e["attr"] for e in inv] == ["jobs", "queue", "latency", "default_hist"]
    assert [e["kind"] for e in inv] == ["counter", "gauge_vec", "histogram", "histogram"]
    assert [e["type"] for e in inv] == ["counter", "gauge", "histogram", "histogram"]
    assert [e["documentation"] for e in inv] == [d.doc for d in ServiceMetrics.definitions()]


def test_inventory_labels_and_buckets(registry):
    by_attr = {e["attr"]: e for e in ServiceMetrics.register(registry).inventory()}
    assert by_attr["queue"]["labels"] == ["queue", "shard"]
    assert by_attr["jobs"]["labels"] == []
    assert by_attr["jobs"]["buckets"] is None
    assert by_attr["latency"]["buckets"] == [0.1, 0.5, float("inf")]
    assert by_attr["default_hist"]["buckets"][-1] == float("inf")
    assert len(by_attr["default_hist"]["buckets"]) > 3


def test_repr_lists_fields(registry):
    m = ServiceMetrics.register(registry)
    assert repr(m) == "ServiceMetrics(jobs, queue, latency, default_hist)"
