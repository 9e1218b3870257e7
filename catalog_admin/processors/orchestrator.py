"""Persistence orchestrator for product create, replace and delete.

The store offers only per-table operations, so a product is written as a
fixed sequence of steps. The sequence is not atomic: when a step fails, the
rows written by earlier steps stay, later steps are skipped, and the error is
raised with the product id and progress log attached. No rollback or retry
happens here.

Replace (edit) tears down every dependent row of the product and rebuilds
them from the payload. Between teardown and the end of the rebuild the
product has no (or only some) children.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..catalog import LightTypeCatalog, UNKNOWN_LIGHT_TYPE_ID
from ..db.models import (
    Product,
    Specs,
    PricingModel,
    BodyColor,
    GalleryImage,
    FAQ,
    SalesFAQ,
    InventoryLine as InventoryLineModel
)
from ..db.store import RelationalStore
from ..errors import CatalogAdminError, ValidationError, UploadError
from ..storage import ObjectStorage
from .axis_registry import AxisRegistry
from .error_tracker import ErrorTracker
from .materializer import materialize
from .payload import ProductPayload, MediaBundle
from .progress import ProgressLog

# Dependent tables in teardown order; inventory goes first because it
# references pricing and body color rows.
CHILD_TABLES = [
    InventoryLineModel.__tablename__,
    Specs.__tablename__,
    PricingModel.__tablename__,
    BodyColor.__tablename__,
    GalleryImage.__tablename__,
    FAQ.__tablename__,
    SalesFAQ.__tablename__
]

@dataclass
class OperationResult:
    """Outcome of a successful create or replace."""
    product_id: str
    inventory_count: int
    pricing_ids: List[str] = field(default_factory=list)
    body_color_ids: List[str] = field(default_factory=list)
    unresolved_light_keys: List[str] = field(default_factory=list)
    log: List[str] = field(default_factory=list)

@dataclass
class _MediaUrls:
    main: str
    black: str
    white: str
    pdf: str
    gallery: List[str]

class PersistenceOrchestrator:
    """Sequences product writes across the product and its dependent tables."""

    def __init__(
        self,
        store: RelationalStore,
        catalog: LightTypeCatalog,
        storage: Optional[ObjectStorage] = None,
        progress: Optional[ProgressLog] = None,
        debug: bool = False
    ):
        """Initialize the orchestrator.

        Args:
            store: Row-level relational store
            catalog: Light-type catalog used to resolve light keys
            storage: Object storage for new media; required only when files are uploaded
            progress: Progress log receiving one entry per step
            debug: Enable debug logging
        """
        self.store = store
        self.catalog = catalog
        self.storage = storage
        self.progress = progress or ProgressLog()
        self.debug = debug
        self.error_tracker = ErrorTracker()
        self.logger = logging.getLogger(self.__class__.__name__)

    def validate(self, payload: ProductPayload) -> AxisRegistry:
        """Validate a payload and its axes without writing anything.

        Returns:
            The validated axis registry

        Raises:
            ValidationError: Listing every problem found
        """
        registry = AxisRegistry.from_payload(payload)
        issues = payload.validate_fields() + registry.collect_issues()
        if issues:
            raise ValidationError(issues)
        return registry

    def create(self, payload: ProductPayload, media: Optional[MediaBundle] = None) -> OperationResult:
        """Create a product with all dependent rows and its inventory.

        Args:
            payload: Validated form state
            media: Newly selected files to upload

        Returns:
            OperationResult

        Raises:
            ValidationError: Before any write
            UploadError: If a file upload fails; no rows are written
            PersistenceError: If a row operation fails; earlier rows remain
        """
        registry = self.validate(payload)
        self.progress.clear()
        self.logger.info(f"Creating product {payload.code_liner}")

        product_id = None
        try:
            urls = self._upload_media(payload, media)
            with self.progress.step("Save product"):
                row = payload.product_row()
                row.update(self._url_fields(urls))
                product_id = self.store.insert(Product.__tablename__, [row])[0]['id']
            return self._rebuild(product_id, payload, registry, urls.gallery)
        except CatalogAdminError as e:
            self._attach(e, product_id)
            raise

    def replace(
        self,
        product_id: str,
        payload: ProductPayload,
        media: Optional[MediaBundle] = None
    ) -> OperationResult:
        """Replace a product's configuration (edit).

        The product row is updated in place, then every dependent row is
        deleted and rebuilt from the payload, whether or not that section
        changed.

        Args:
            product_id: Product to edit
            payload: Current form state
            media: Newly selected files; fields without a file keep the payload URL

        Returns:
            OperationResult
        """
        registry = self.validate(payload)
        self.progress.clear()
        self.logger.info(f"Replacing product {product_id} ({payload.code_liner})")

        try:
            urls = self._upload_media(payload, media)
            with self.progress.step("Update product"):
                patch = payload.product_row()
                patch.update(self._url_fields(urls))
                self.store.update(Product.__tablename__, product_id, patch)
            self._teardown(product_id)
            return self._rebuild(product_id, payload, registry, urls.gallery)
        except CatalogAdminError as e:
            self._attach(e, product_id)
            raise

    def delete(self, product_id: str, hard: bool = False) -> None:
        """Delete a product.

        Soft delete stamps ``deleted_at``; hard delete removes the dependent
        rows first, then the product row.

        Raises:
            ProductNotFoundError: If no product has this id; nothing is deleted
        """
        self.progress.clear()
        try:
            if hard:
                self.store.get(Product.__tablename__, product_id)
                self._teardown(product_id)
                with self.progress.step("Delete product"):
                    self.store.delete(Product.__tablename__, {'id': product_id})
            else:
                with self.progress.step("Move product to trash"):
                    self.store.update(Product.__tablename__, product_id, {'deleted_at': datetime.utcnow()})
        except CatalogAdminError as e:
            self._attach(e, product_id)
            raise

    def get_product_full(self, product_id: str) -> Dict[str, Any]:
        """Load a product with all dependent rows, as used by the edit form."""
        product = self.store.get(Product.__tablename__, product_id)
        specs = self.store.select_all(Specs.__tablename__, {'product_id': product_id})
        return {
            'product': product,
            'specs': specs[0] if specs else None,
            'pricing': self.store.select_all(PricingModel.__tablename__, {'product_id': product_id}),
            'body_colors': self.store.select_all(BodyColor.__tablename__, {'product_id': product_id}),
            'gallery': self.store.select_all(GalleryImage.__tablename__, {'product_id': product_id}, 'sort_order'),
            'faqs': self.store.select_all(FAQ.__tablename__, {'product_id': product_id}, 'sort'),
            'faq_sales': self.store.select_all(SalesFAQ.__tablename__, {'product_id': product_id}, 'sort')
        }

    def list_products(self, search: Optional[str] = None, include_deleted: bool = False) -> List[Dict[str, Any]]:
        """List products, most recently updated first.

        Args:
            search: Substring matched against name or liner code
            include_deleted: Include soft-deleted products
        """
        products = self.store.select_all(Product.__tablename__, order_by='-updated_at')
        if not include_deleted:
            products = [p for p in products if p['deleted_at'] is None]
        if search:
            needle = search.lower()
            products = [
                p for p in products
                if needle in (p['name'] or '').lower() or needle in (p['code_liner'] or '').lower()
            ]
        return products

    def get_inventory(self, product_id: str) -> List[Dict[str, Any]]:
        """Return the stored inventory lines of a product."""
        return self.store.select_all(InventoryLineModel.__tablename__, {'product_id': product_id})

    def _teardown(self, product_id: str) -> None:
        """Delete every dependent row of a product."""
        with self.progress.step("Remove previous product data"):
            for table in CHILD_TABLES:
                count = self.store.delete(table, {'product_id': product_id})
                if self.debug:
                    self.logger.debug(f"Deleted {count} rows from {table}")

    def _rebuild(
        self,
        product_id: str,
        payload: ProductPayload,
        registry: AxisRegistry,
        gallery_urls: List[str]
    ) -> OperationResult:
        """Write specs, gallery, axes, FAQs and the materialized inventory."""
        with self.progress.step("Save specs"):
            self.store.insert(Specs.__tablename__, [payload.specs.to_row(product_id)])

        with self.progress.step(f"Save gallery ({len(gallery_urls)} images)"):
            self.store.insert(GalleryImage.__tablename__, [
                {'product_id': product_id, 'image_url': url, 'sort_order': i}
                for i, url in enumerate(gallery_urls, 1)
            ])

        with self.progress.step(f"Save {len(registry.pricing_models)} pricing models"):
            pricing_rows = self.store.insert(
                PricingModel.__tablename__,
                [model.to_row(product_id) for model in registry.pricing_models]
            )

        with self.progress.step(f"Save {len(registry.body_colors)} body colors"):
            color_rows = self.store.insert(
                BodyColor.__tablename__,
                [color.to_row(product_id) for color in registry.body_colors]
            )

        with self.progress.step(f"Save FAQs ({len(payload.faqs)})"):
            self.store.insert(FAQ.__tablename__, [
                faq.to_row(product_id, i) for i, faq in enumerate(payload.faqs, 1)
            ])

        with self.progress.step(f"Save sales FAQs ({len(payload.faq_sales)})"):
            self.store.insert(SalesFAQ.__tablename__, [
                faq.to_row(product_id, i) for i, faq in enumerate(payload.faq_sales, 1)
            ])

        with self.progress.step("Generate inventory"):
            catalog = self.catalog.list()
            lines = materialize(
                product_id,
                pricing_rows,
                color_rows,
                registry.resolved_light_keys,
                catalog,
                code_liner=payload.code_liner,
                error_tracker=self.error_tracker
            )

        with self.progress.step(f"Save {len(lines)} inventory lines"):
            self.store.insert(InventoryLineModel.__tablename__, [line.to_row() for line in lines])

        unresolved = sorted({line.light_key for line in lines if line.light_type_id == UNKNOWN_LIGHT_TYPE_ID})

        self.logger.info(f"Product {product_id} saved with {len(lines)} inventory lines")
        return OperationResult(
            product_id=product_id,
            inventory_count=len(lines),
            pricing_ids=[row['id'] for row in pricing_rows],
            body_color_ids=[row['id'] for row in color_rows],
            unresolved_light_keys=unresolved,
            log=self.progress.messages()
        )

    def _upload_media(self, payload: ProductPayload, media: Optional[MediaBundle]) -> _MediaUrls:
        """Upload new files; fields without a new file keep their stored URL."""
        urls = _MediaUrls(
            main=payload.image_url,
            black=payload.image_black_url,
            white=payload.image_white_url,
            pdf=payload.pdf_url,
            gallery=list(payload.gallery_urls)
        )
        if media is None or media.is_empty():
            return urls
        folder = payload.code_liner
        with self.progress.step("Upload files"):
            if self.storage is None:
                raise UploadError('media', "no object storage configured")
            for attr in ('main', 'black', 'white', 'pdf'):
                path = getattr(media, attr)
                if path is not None:
                    setattr(urls, attr, self.storage.upload(path, folder))
            if media.gallery:
                urls.gallery.extend(self.storage.upload(path, folder) for path in media.gallery)
        return urls

    @staticmethod
    def _url_fields(urls: _MediaUrls) -> Dict[str, str]:
        return {
            'image_url': urls.main,
            'image_black_url': urls.black,
            'image_white_url': urls.white,
            'pdf_url': urls.pdf
        }

    def _attach(self, error: CatalogAdminError, product_id: Optional[str]) -> None:
        """Attach the partial state to an error surfaced to the caller."""
        if error.product_id is None:
            error.product_id = product_id
        error.log = self.progress.messages()
