# =============================================================================
# core/services/import_service.py - Bulk Product Import
# =============================================================================
# Reads a product CSV with pandas and creates one product per row.
#
# Required columns: name, price, category (slug or id)
# Optional columns: description, stock, subcategory, image, is_featured, unit
#
# Rows are independent: a bad row is reported and the rest still import.
# =============================================================================

import io
import logging
from typing import Any

import pandas as pd
from pydantic import ValidationError

from app.exceptions import CateringAPIException, ImportFileError
from core.models.product import ProductCreate
from core.models.store import ImportResult, ImportRowError
from core.services.category_service import CategoryService, SubcategoryService
from core.services.product_service import ProductService

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("name", "price", "category")
TRUE_VALUES = {"1", "true", "yes", "y"}


def read_import_csv(content: bytes, filename: str) -> pd.DataFrame:
    """
    Parse an import file into a string-typed DataFrame.

    Column names are stripped and lower-cased.

    Raises:
        ImportFileError: If the file cannot be parsed or lacks required columns
    """
    try:
        df = pd.read_csv(
            io.BytesIO(content),
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise ImportFileError(filename, str(e)) from e

    df.columns = [str(col).strip().lower() for col in df.columns]

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise ImportFileError(filename, f"missing required columns: {', '.join(missing)}")

    return df


def _format_validation_error(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
        for err in error.errors()
    )


class ImportService:
    """Imports products from CSV files."""

    def __init__(self, products: ProductService, categories: CategoryService, subcategories: SubcategoryService):
        self.products = products
        self.categories = categories
        self.subcategories = subcategories

    async def import_products(self, content: bytes, filename: str) -> ImportResult:
        df = read_import_csv(content, filename)
        result = ImportResult()

        # 1-based data row numbers (the header is not counted)
        for row_number, row in enumerate(df.to_dict("records"), start=1):
            try:
                payload = await self._build_product(row)
                await self.products.create_product(payload)
                result.imported += 1
            except ValidationError as e:
                result.errors.append(ImportRowError(row=row_number, error=_format_validation_error(e)))
            except (CateringAPIException, ValueError) as e:
                message = e.message if isinstance(e, CateringAPIException) else str(e)
                result.errors.append(ImportRowError(row=row_number, error=message))

        result.failed = len(result.errors)
        logger.info(f"Import {filename}: {result.imported} imported, {result.failed} failed")
        return result

    async def _build_product(self, row: dict[str, Any]) -> ProductCreate:
        category_ref = row["category"].strip()
        if not category_ref:
            raise ValueError("category is required")

        category = await self.categories.get_by_slug_or_id(category_ref)
        if category is None:
            raise ValueError(f"Unknown category '{category_ref}'")

        subcategory_id = None
        subcategory_ref = row.get("subcategory", "").strip()
        if subcategory_ref:
            subcategory = await self.subcategories.get_by_slug_or_id(subcategory_ref)
            if subcategory is None:
                raise ValueError(f"Unknown subcategory '{subcategory_ref}'")
            subcategory_id = subcategory["id"]

        price_raw = row["price"].strip()
        try:
            price = float(price_raw)
        except ValueError:
            raise ValueError(f"Invalid price '{price_raw}'")

        stock_raw = row.get("stock", "").strip()
        try:
            stock = int(float(stock_raw)) if stock_raw else 0
        except ValueError:
            raise ValueError(f"Invalid stock '{stock_raw}'")

        image = row.get("image", "").strip()

        return ProductCreate(
            name=row["name"].strip(),
            description=row.get("description", "").strip(),
            price=price,
            category_id=category["id"],
            subcategory_id=subcategory_id,
            images=[image] if image else [],
            stock=stock,
            unit=row.get("unit", "").strip() or None,
            is_featured=row.get("is_featured", "").strip().lower() in TRUE_VALUES,
        )
