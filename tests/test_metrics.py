from core.metrics import PrometheusMetrics


def test_counters_accumulate_per_label_set():
    metrics = PrometheusMetrics()
    metrics.inc_counter("hits", {"kind": "file"})
    metrics.inc_counter("hits", {"kind": "file"})
    metrics.inc_counter("hits", {"kind": "template"})
    assert metrics.get_counter("hits", {"kind": "file"}) == 2
    assert metrics.get_counter("hits", {"kind": "template"}) == 1
    assert metrics.get_counter("hits", {"kind": "other"}) == 0


def test_histogram_renders_cumulative_buckets():
    metrics = PrometheusMetrics()
    metrics.observe_histogram("latency", 0.02, {"kind": "file"}, buckets=[0.01, 0.1, float("inf")])
    metrics.observe_histogram("latency", 0.5, {"kind": "file"}, buckets=[0.01, 0.1, float("inf")])
    text = metrics.render_prometheus()
    assert 'latency_bucket{kind="file",le="0.01"} 0' in text
    assert 'latency_bucket{kind="file",le="0.1"} 1' in text
    assert 'latency_bucket{kind="file",le="+Inf"} 2' in text
    assert 'latency_count{kind="file"} 2' in text


def test_gauge_without_labels():
    metrics = PrometheusMetrics()
    metrics.set_gauge("up", value=1)
    assert "up 1\n" in metrics.render_prometheus()
