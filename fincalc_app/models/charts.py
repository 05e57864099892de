"""Chart series records consumed as-is by chart renderers."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class ChartDataset:
    """One labelled line of samples aligned to the series labels."""
    label: str
    data: tuple[float, ...]
    border_color: str = "#409eff"
    background_color: str = "transparent"
    fill: bool = False
    tension: float = 0.4
    border_dash: Optional[tuple[int, ...]] = None
    point_radius: Optional[int] = None


@dataclass(frozen=True)
class ChartSeries:
    """Labels plus one or more datasets of equal length."""
    labels: tuple[str, ...]
    datasets: tuple[ChartDataset, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        for dataset in self.datasets:
            if len(dataset.data) != len(self.labels):
                raise ValueError(
                    f"Dataset '{dataset.label}' has {len(dataset.data)} samples "
                    f"for {len(self.labels)} labels"
                )

    def dataset(self, label: str) -> ChartDataset:
        """Look up a dataset by its label."""
        for dataset in self.datasets:
            if dataset.label == label:
                return dataset
        raise KeyError(label)

    def to_dict(self) -> dict:
        """Chart.js shaped mapping."""
        datasets = []
        for dataset in self.datasets:
            entry = {
                "label": dataset.label,
                "data": list(dataset.data),
                "borderColor": dataset.border_color,
                "backgroundColor": dataset.background_color,
                "fill": dataset.fill,
                "tension": dataset.tension,
            }
            if dataset.border_dash is not None:
                entry["borderDash"] = list(dataset.border_dash)
            if dataset.point_radius is not None:
                entry["pointRadius"] = dataset.point_radius
            datasets.append(entry)
        return {"labels": list(self.labels), "datasets": datasets}
