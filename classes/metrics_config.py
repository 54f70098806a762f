import json

EDGE_POLICIES = ("drop", "reject")


class MetricsConfig:
    def __init__(self, **kwargs):
        self.self_loops = kwargs.get("self_loops", "drop")
        self.dangling_edges = kwargs.get("dangling_edges", "drop")
        self.decimals = kwargs.get("decimals", 3)
        self.compute_heterogeneity = kwargs.get("compute_heterogeneity", True)

        if self.self_loops not in EDGE_POLICIES:
            raise ValueError(f"Unknown self_loops policy: {self.self_loops}")
        if self.dangling_edges not in EDGE_POLICIES:
            raise ValueError(f"Unknown dangling_edges policy: {self.dangling_edges}")
        if not isinstance(self.decimals, int) or self.decimals < 0:
            raise ValueError(f"decimals must be a non-negative int, got {self.decimals}")

    def to_dict(self):
        return dict(vars(self))

    def __eq__(self, value):
        if not isinstance(value, MetricsConfig):
            return NotImplemented
        return self.to_dict() == value.to_dict()

    def to_json(self):
        return json.dumps(self.to_dict())

    @staticmethod
    def from_json(json_str):
        return MetricsConfig(**json.loads(json_str))


default_metrics_config = MetricsConfig()
