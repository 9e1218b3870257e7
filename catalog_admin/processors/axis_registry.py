"""Validated configuration axes of one product."""

from dataclasses import dataclass
from typing import List, Sequence

from ..catalog import LightKey
from ..errors import ValidationError
from .payload import PricingModelInput, BodyColorInput, ProductPayload

@dataclass
class AxisRegistry:
    """The three independent axes a product varies along.

    Call ``validate`` before materializing; it guarantees every axis is
    non-empty and every light key is known and selected once.
    """
    pricing_models: Sequence[PricingModelInput]
    body_colors: Sequence[BodyColorInput]
    light_keys: Sequence[str]

    @classmethod
    def from_payload(cls, payload: ProductPayload) -> 'AxisRegistry':
        return cls(
            pricing_models=list(payload.pricing),
            body_colors=list(payload.body_colors),
            light_keys=list(payload.light_type_values)
        )

    def collect_issues(self) -> List[str]:
        """Return all axis problems without raising."""
        issues = []
        if not self.pricing_models:
            issues.append("At least one pricing model is required")
        if not self.body_colors:
            issues.append("At least one body color is required")
        if not self.light_keys:
            issues.append("At least one light type must be selected")

        allowed = {key.value for key in LightKey}
        seen = set()
        for key in self.light_keys:
            if key not in allowed:
                issues.append(f"Unknown light type {key!r}; expected one of: {', '.join(sorted(allowed))}")
            elif key in seen:
                issues.append(f"Light type {key!r} is selected more than once")
            seen.add(key)
        return issues

    def validate(self) -> 'AxisRegistry':
        """Raise ValidationError if any axis is empty or malformed."""
        issues = self.collect_issues()
        if issues:
            raise ValidationError(issues)
        return self

    @property
    def resolved_light_keys(self) -> List[LightKey]:
        return [LightKey(key) for key in self.light_keys]

    @property
    def expected_line_count(self) -> int:
        """Number of inventory lines the axes materialize into."""
        return len(self.pricing_models) * len(self.body_colors) * len(self.light_keys)
