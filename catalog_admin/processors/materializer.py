"""Cross-product materialization of configuration axes into inventory lines."""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from ..catalog import LightKey, LightTypeEntry, resolve
from .error_tracker import ErrorTracker

logger = logging.getLogger(__name__)

# Display marker on new lines; not an availability signal
IN_STOCK_STATUS = 'موجود'

@dataclass(frozen=True)
class InventoryLine:
    """One purchasable pricing x color x light combination."""
    product_id: str
    pricing_id: str
    body_color_id: str
    light_type_id: str
    light_key: str
    code_liner: str
    model_name: str
    body_color: str
    light_type: str
    stock_qty: int = 0
    status: str = IN_STOCK_STATUS
    status_pricing_model: str = IN_STOCK_STATUS
    status_body_color: str = IN_STOCK_STATUS
    status_light_type: str = IN_STOCK_STATUS

    @property
    def identity(self):
        """Semantic identity of the line."""
        return (self.pricing_id, self.body_color_id, self.light_type_id)

    def to_row(self) -> Dict[str, Any]:
        return asdict(self)

def materialize(
    product_id: str,
    pricing_rows: Sequence[Mapping[str, Any]],
    color_rows: Sequence[Mapping[str, Any]],
    light_keys: Sequence[Union[LightKey, str]],
    catalog: Iterable[LightTypeEntry],
    code_liner: str = '',
    error_tracker: Optional[ErrorTracker] = None
) -> List[InventoryLine]:
    """Expand persisted pricing and color rows and light keys into inventory lines.

    Pricing is the outer loop, colors the middle, light keys the inner, each
    in the order given. Every line starts with zero stock. Light keys with no
    catalog match get the unresolved sentinel id and are logged; they never
    abort the run.

    Args:
        product_id: Owning product id
        pricing_rows: Persisted pricing rows (need ``id`` and ``model_name``)
        color_rows: Persisted body color rows (need ``id`` and ``name``)
        light_keys: Selected light keys
        catalog: Light-type catalog snapshot
        code_liner: Product liner code copied onto each line
        error_tracker: Optional tracker recording unresolved keys

    Returns:
        List of |pricing| x |colors| x |light keys| inventory lines
    """
    catalog = list(catalog)
    resolutions = [resolve(key, catalog) for key in light_keys]
    
    for resolution in resolutions:
        if not resolution.matched:
            logger.warning(
                f"Light type {resolution.key!r} has no catalog match; "
                f"using {resolution.catalog_id!r} for product {product_id}"
            )
            if error_tracker is not None:
                error_tracker.add_error(
                    'LIGHT_TYPE_UNRESOLVED',
                    f"No catalog entry for light type {resolution.key!r}",
                    {'product_id': product_id, 'catalog_size': len(catalog)}
                )
    
    lines = []
    for pricing in pricing_rows:
        for color in color_rows:
            for resolution in resolutions:
                lines.append(InventoryLine(
                    product_id=product_id,
                    pricing_id=pricing['id'],
                    body_color_id=color['id'],
                    light_type_id=resolution.catalog_id,
                    light_key=resolution.key,
                    code_liner=code_liner,
                    model_name=pricing.get('model_name', ''),
                    body_color=color.get('name', ''),
                    light_type=resolution.label
                ))
    
    logger.debug(
        f"Materialized {len(lines)} inventory lines for product {product_id} "
        f"({len(pricing_rows)} pricing x {len(color_rows)} colors x {len(resolutions)} light types)"
    )
    return lines
