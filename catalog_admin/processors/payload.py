"""Product payload types.

A payload is the complete form state for one create or edit operation. Form
flags arrive as ``"true"``/``"false"`` strings; ``from_form`` turns them into
booleans so nothing past this module sees the string form.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..db.models import PricingModelKey, BodyColorKey
from ..errors import ValidationError
from ..utils import parse_form_bool, blank_if_none

MIN_PRODUCT_NAME_LENGTH = 3

def _enum_value(enum_cls, value: Any, field_name: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ', '.join(member.value for member in enum_cls)
        raise ValidationError([f"{field_name} must be one of: {allowed} (got {value!r})"])

def _bool_field(data: Dict[str, Any], key: str, default: bool) -> bool:
    if key not in data or data[key] is None:
        return default
    try:
        return parse_form_bool(data[key], key)
    except ValueError as e:
        raise ValidationError([str(e)])

def _number(value: Any, field_name: str, cast=float):
    if value is None or value == '':
        return cast(0)
    try:
        return cast(value)
    except (TypeError, ValueError):
        raise ValidationError([f"{field_name} must be a number (got {value!r})"])

@dataclass
class SpecsInput:
    """Technical specification fields."""
    code_liner: str
    dimensions: str = ''
    inset_cut_dimensions: str = ''
    row_in_liner: str = ''
    body_material: str = ''
    main_usage: str = ''
    installation_type: str = ''
    installation_method: str = ''
    notes: str = ''
    ceiling_height: str = ''

    @classmethod
    def from_form(cls, data: Dict[str, Any]) -> 'SpecsInput':
        return cls(
            code_liner=blank_if_none(data.get('code_liner')),
            dimensions=blank_if_none(data.get('dimensions')),
            inset_cut_dimensions=blank_if_none(data.get('inset_cut_dimensions')),
            row_in_liner=blank_if_none(data.get('row_in_liner')),
            body_material=blank_if_none(data.get('body_material')),
            main_usage=blank_if_none(data.get('main_usage')),
            installation_type=blank_if_none(data.get('installation_type')),
            installation_method=blank_if_none(data.get('installation_method')),
            notes=blank_if_none(data.get('notes')),
            ceiling_height=blank_if_none(data.get('ceiling_height', data.get('ertafa_saqf')))
        )

    def to_row(self, product_id: str) -> Dict[str, Any]:
        row = dict(self.__dict__)
        row['product_id'] = product_id
        return row

@dataclass
class PricingModelInput:
    """One pricing model (axis A)."""
    model_name: str
    model_key: PricingModelKey
    pricing_code_liner: str
    price_per_meter: float = 0.0
    warranty_months: int = 0
    light: str = ''
    light_source_fa: str = ''
    light_source: str = ''
    density: str = ''
    three_color: str = 'No'
    rgb: str = 'No'
    ip65: bool = False
    ip20: bool = False
    tag: str = ''
    space_recommend: str = ''
    dimmer: str = ''
    suitable_for: str = ''
    longevity: str = ''
    lumen: int = 0
    w_per_meter: str = ''
    power_source: str = ''
    row_in_liner: str = ''

    @classmethod
    def from_form(cls, data: Dict[str, Any]) -> 'PricingModelInput':
        return cls(
            model_name=blank_if_none(data.get('model_name')),
            model_key=_enum_value(PricingModelKey, data.get('model_key'), 'model_key'),
            pricing_code_liner=blank_if_none(data.get('pricing_code_liner')),
            price_per_meter=_number(data.get('price_per_meter'), 'price_per_meter'),
            warranty_months=_number(data.get('warranty_months'), 'warranty_months', int),
            light=blank_if_none(data.get('light')),
            light_source_fa=blank_if_none(data.get('light_source_fa', data.get('light_source_persion'))),
            light_source=blank_if_none(data.get('light_source')),
            density=blank_if_none(data.get('density')),
            three_color=blank_if_none(data.get('three_color', 'No')),
            rgb=blank_if_none(data.get('rgb', 'No')),
            ip65=_bool_field(data, 'ip65', False),
            ip20=_bool_field(data, 'ip20', False),
            tag=blank_if_none(data.get('tag', data.get('tage'))),
            space_recommend=blank_if_none(data.get('space_recommend', data.get('spase_recommend'))),
            dimmer=blank_if_none(data.get('dimmer', data.get('dimer'))),
            suitable_for=blank_if_none(data.get('suitable_for')),
            longevity=blank_if_none(data.get('longevity')),
            lumen=_number(data.get('lumen'), 'lumen', int),
            w_per_meter=blank_if_none(data.get('w_per_meter')),
            power_source=blank_if_none(data.get('power_source')),
            row_in_liner=blank_if_none(data.get('row_in_liner'))
        )

    def to_row(self, product_id: str) -> Dict[str, Any]:
        row = dict(self.__dict__)
        row['product_id'] = product_id
        return row

@dataclass
class BodyColorInput:
    """One body color (axis B)."""
    name: str
    key: BodyColorKey
    initial_stock: int = 0

    @classmethod
    def from_form(cls, data: Dict[str, Any]) -> 'BodyColorInput':
        return cls(
            name=blank_if_none(data.get('name')),
            key=_enum_value(BodyColorKey, data.get('key'), 'key'),
            initial_stock=_number(data.get('initial_stock'), 'initial_stock', int)
        )

    def to_row(self, product_id: str) -> Dict[str, Any]:
        return {
            'product_id': product_id,
            'name': self.name,
            'key': self.key,
            'initial_stock': self.initial_stock
        }

@dataclass
class FAQInput:
    """Question and answer pair."""
    question: str
    answer: str
    code_liner: str

    @classmethod
    def from_form(cls, data: Dict[str, Any]) -> 'FAQInput':
        return cls(
            question=blank_if_none(data.get('question')),
            answer=blank_if_none(data.get('answer')),
            code_liner=blank_if_none(data.get('code_liner'))
        )

    def to_row(self, product_id: str, sort: int) -> Dict[str, Any]:
        return {
            'product_id': product_id,
            'question': self.question,
            'answer': self.answer,
            'code_liner': self.code_liner,
            'sort': sort
        }

@dataclass
class MediaBundle:
    """Files newly chosen by the operator; ``None`` keeps the stored URL."""
    main: Optional[Path] = None
    black: Optional[Path] = None
    white: Optional[Path] = None
    pdf: Optional[Path] = None
    gallery: List[Path] = field(default_factory=list)

    @classmethod
    def from_form(cls, data: Optional[Dict[str, Any]], base_dir: Optional[Path] = None) -> 'MediaBundle':
        """Build a bundle from file paths, relative paths resolved against base_dir."""
        data = data or {}

        def _path(value):
            if not value:
                return None
            path = Path(value)
            if base_dir is not None and not path.is_absolute():
                path = base_dir / path
            return path

        return cls(
            main=_path(data.get('main')),
            black=_path(data.get('black')),
            white=_path(data.get('white')),
            pdf=_path(data.get('pdf')),
            gallery=[_path(item) for item in data.get('gallery', []) if item]
        )

    def is_empty(self) -> bool:
        return not any([self.main, self.black, self.white, self.pdf, self.gallery])

@dataclass
class ProductPayload:
    """Complete form state of one product."""
    name: str
    code_liner: str
    category: str
    specs: SpecsInput
    pricing: List[PricingModelInput]
    body_colors: List[BodyColorInput]
    light_type_values: List[str]
    faqs: List[FAQInput] = field(default_factory=list)
    faq_sales: List[FAQInput] = field(default_factory=list)
    short_description: str = ''
    no_pricing: str = ''
    is_active: bool = True
    custom_design: bool = False
    active_body_color: bool = True
    active_light_type: bool = True
    image_url: str = ''
    image_black_url: str = ''
    image_white_url: str = ''
    pdf_url: str = ''
    gallery_urls: List[str] = field(default_factory=list)

    @classmethod
    def from_form(cls, data: Dict[str, Any]) -> 'ProductPayload':
        """Build a payload from submitted form data.

        Args:
            data: Form values as submitted by the wizard

        Returns:
            ProductPayload

        Raises:
            ValidationError: If a flag, enum or number cannot be parsed
        """
        specs_data = dict(data.get('specs') or {})
        specs_data.setdefault('code_liner', data.get('code_liner'))
        return cls(
            name=blank_if_none(data.get('name')),
            code_liner=blank_if_none(data.get('code_liner')),
            category=blank_if_none(data.get('category')),
            short_description=blank_if_none(data.get('short_description')),
            no_pricing=blank_if_none(data.get('no_pricing')),
            is_active=_bool_field(data, 'is_active', True),
            custom_design=_bool_field(data, 'custom_design', _bool_field(data, 'Custom_design', False)),
            active_body_color=_bool_field(data, 'active_body_color', True),
            active_light_type=_bool_field(data, 'active_light_type', True),
            image_url=blank_if_none(data.get('image_url')),
            image_black_url=blank_if_none(data.get('image_black_url')),
            image_white_url=blank_if_none(data.get('image_white_url')),
            pdf_url=blank_if_none(data.get('pdf_url', data.get('Pdf_url'))),
            gallery_urls=list(data.get('gallery_urls') or []),
            specs=SpecsInput.from_form(specs_data),
            pricing=[PricingModelInput.from_form(item) for item in data.get('pricing') or []],
            body_colors=[BodyColorInput.from_form(item) for item in data.get('body_colors') or []],
            faqs=[FAQInput.from_form(item) for item in data.get('faqs') or []],
            faq_sales=[FAQInput.from_form(item) for item in data.get('faq_sales') or []],
            light_type_values=[str(value) for value in data.get('light_type_values') or []]
        )

    def validate_fields(self) -> List[str]:
        """Check required fields and value ranges.

        Axis emptiness is checked by the axis registry, not here.

        Returns:
            List of issues; empty when the payload is valid
        """
        issues = []
        if len(self.name.strip()) < MIN_PRODUCT_NAME_LENGTH:
            issues.append(f"Product name must be at least {MIN_PRODUCT_NAME_LENGTH} characters")
        if not self.code_liner.strip():
            issues.append("Liner code is required")
        if not self.category.strip():
            issues.append("Category is required")
        if not self.specs.code_liner.strip():
            issues.append("Specs liner code is required")

        for i, model in enumerate(self.pricing, 1):
            if not model.model_name.strip():
                issues.append(f"Pricing model {i}: model name is required")
            if not model.pricing_code_liner.strip():
                issues.append(f"Pricing model {i}: liner code is required")
            if model.price_per_meter < 0:
                issues.append(f"Pricing model {i}: price per meter cannot be negative")
            if model.warranty_months < 0:
                issues.append(f"Pricing model {i}: warranty months cannot be negative")

        for i, color in enumerate(self.body_colors, 1):
            if not color.name.strip():
                issues.append(f"Body color {i}: name is required")
            if color.initial_stock < 0:
                issues.append(f"Body color {i}: initial stock cannot be negative")

        for label, items in (('FAQ', self.faqs), ('Sales FAQ', self.faq_sales)):
            for i, faq in enumerate(items, 1):
                if not faq.question.strip():
                    issues.append(f"{label} {i}: question is required")
                if not faq.answer.strip():
                    issues.append(f"{label} {i}: answer is required")
                if not faq.code_liner.strip():
                    issues.append(f"{label} {i}: liner code is required")

        return issues

    def product_row(self) -> Dict[str, Any]:
        """Return the product table row for this payload."""
        return {
            'name': self.name,
            'code_liner': self.code_liner,
            'category': self.category,
            'short_description': self.short_description,
            'no_pricing': self.no_pricing,
            'is_active': self.is_active,
            'custom_design': self.custom_design,
            'active_body_color': self.active_body_color,
            'active_light_type': self.active_light_type,
            'image_url': self.image_url,
            'image_black_url': self.image_black_url,
            'image_white_url': self.image_white_url,
            'pdf_url': self.pdf_url
        }
