import threading


def _format_labels(pairs):
    if not pairs:
        return ''
    return '{' + ','.join(f'{k}="{v}"' for k, v in pairs) + '}'


class PrometheusMetrics:
    """In-process registry rendered in the Prometheus text exposition format."""

    def __init__(self):
        self.lock = threading.Lock()
        self.counters = {}
        self.histograms = {}
        self.gauges = {}
        self.default_buckets = [0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, float('inf')]

    def _labels_key(self, labels):
        return tuple(sorted((labels or {}).items()))

    def inc_counter(self, name, labels=None, value=1):
        with self.lock:
            key = (name, self._labels_key(labels))
            self.counters[key] = self.counters.get(key, 0) + value

    def get_counter(self, name, labels=None):
        with self.lock:
            return self.counters.get((name, self._labels_key(labels)), 0)

    def set_gauge(self, name, labels=None, value=0.0):
        with self.lock:
            self.gauges[(name, self._labels_key(labels))] = value

    def observe_histogram(self, name, value, labels=None, buckets=None):
        if buckets is None:
            buckets = self.default_buckets
        labels_key = self._labels_key(labels)
        with self.lock:
            h = self.histograms.setdefault(name, {'buckets': buckets, 'counts': {}, 'sum': {}, 'count': {}})
            counts = h['counts'].setdefault(labels_key, [0] * len(h['buckets']))
            for i, edge in enumerate(h['buckets']):
                if value <= edge:
                    counts[i] += 1
                    break
            h['sum'][labels_key] = h['sum'].get(labels_key, 0.0) + float(value)
            h['count'][labels_key] = h['count'].get(labels_key, 0) + 1

    def render_prometheus(self):
        lines = []
        with self.lock:
            for (name, labels_key), val in self.counters.items():
                lines.append(f"{name}{_format_labels(labels_key)} {val}")
            for (name, labels_key), val in self.gauges.items():
                lines.append(f"{name}{_format_labels(labels_key)} {val}")
            for name, h in self.histograms.items():
                for labels_key, counts in h['counts'].items():
                    cum = 0
                    for i, edge in enumerate(h['buckets']):
                        cum += counts[i]
                        edge_str = '+Inf' if edge == float('inf') else ('%.3f' % edge).rstrip('0').rstrip('.')
                        bucket_labels = dict(labels_key)
                        bucket_labels['le'] = edge_str
                        lines.append(f"{name}_bucket{_format_labels(sorted(bucket_labels.items()))} {cum}")
                    lines.append(f"{name}_sum{_format_labels(labels_key)} {h['sum'].get(labels_key, 0.0)}")
                    lines.append(f"{name}_count{_format_labels(labels_key)} {h['count'].get(labels_key, 0)}")
        return "\n".join(lines) + "\n"
