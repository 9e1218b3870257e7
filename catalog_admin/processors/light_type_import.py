"""Light-type catalog import from CSV files."""

from typing import List, Tuple
import pandas as pd
from sqlalchemy.orm import Session

from ..catalog import LightKey
from ..catalog.resolver import matches
from ..db.models import LightType
from ..utils import generate_uuid
from .base import BaseProcessor

class LightTypeImportProcessor(BaseProcessor):
    """Seed or refresh the light-type catalog from a CSV file.
    
    The file needs a ``name`` column and may carry an ``id`` column. A known
    id renames its entry; other rows are matched to existing entries by name
    (case-insensitive) and new names are inserted.
    """
    
    counter_names = ('total_light_types', 'created', 'updated', 'unchanged', 'skipped')
    
    def validate_data(self, df: pd.DataFrame) -> Tuple[List[str], List[str]]:
        """Validate data before processing.
        
        Args:
            df: DataFrame to validate
            
        Returns:
            Tuple of (critical_issues, warnings)
        """
        critical_issues = []
        warnings = []
        
        if 'name' not in df.columns:
            critical_issues.append("Missing required columns: name")
            return critical_issues, warnings
        
        empty_names = df[df['name'].isna()]
        if not empty_names.empty:
            warnings.append(
                f"Found {len(empty_names)} rows with missing names that will be skipped. "
                f"First few row numbers: {', '.join(map(str, empty_names.index[:3]))}"
            )
        
        duplicated = df[df['name'].str.lower().duplicated(keep='first') & df['name'].notna()]
        if not duplicated.empty:
            warnings.append(
                f"Found {len(duplicated)} duplicate names; only the first occurrence is imported. "
                f"First few: {', '.join(duplicated['name'].head(3).tolist())}"
            )
        
        # Every selectable light key should be resolvable after the import
        with self.session_manager as session:
            stored = [name for (name,) in session.query(LightType.name).all()]
        names = stored + df['name'].dropna().tolist()
        for key in LightKey:
            if not any(matches(key, name) for name in names):
                warnings.append(f"No entry matches light type {key.value!r}; it will resolve to the unknown id")
        
        return critical_issues, warnings
    
    def _process_batch(self, session: Session, batch_df: pd.DataFrame) -> pd.DataFrame:
        """Upsert the batch into the catalog.
        
        A row whose ``id`` already exists renames that entry when the name
        differs. Rows without a known id are matched by name; unmatched
        names are inserted.
        
        Args:
            session: Database session for this batch
            batch_df: DataFrame containing batch of rows to process
            
        Returns:
            DataFrame with the catalog id of each row
        """
        entries = session.query(LightType).all()
        by_id = {lt.id: lt for lt in entries}
        by_name = {lt.name.lower(): lt for lt in entries}
        ids = []
        
        for _, row in batch_df.iterrows():
            name = row['name']
            if pd.isna(name) or not str(name).strip():
                self.count('skipped')
                ids.append(None)
                continue
            
            name = str(name).strip()
            self.count('total_light_types')
            row_id = row.get('id')
            row_id = None if pd.isna(row_id) or not str(row_id).strip() else str(row_id).strip()
            
            current = by_id.get(row_id) if row_id else None
            if current is not None and current.name.lower() != name.lower():
                owner = by_name.get(name.lower())
                if owner is not None and owner.id != current.id:
                    self.logger.warning(
                        f"Skipping rename of {current.id} to {name!r}: the name belongs to {owner.id}"
                    )
                    self.count('skipped')
                    ids.append(None)
                    continue
                by_name.pop(current.name.lower(), None)
                self.logger.info(f"Renaming light type {current.id}: {current.name!r} -> {name!r}")
                current.name = name
                by_name[name.lower()] = current
                self.count('updated')
                ids.append(current.id)
                continue
            
            if current is None:
                current = by_name.get(name.lower())
            if current is not None:
                self.count('unchanged')
                ids.append(current.id)
                continue
            
            light_type = LightType(id=row_id or generate_uuid(), name=name)
            session.add(light_type)
            by_id[light_type.id] = light_type
            by_name[name.lower()] = light_type
            self.count('created')
            ids.append(light_type.id)
            
            if self.debug:
                self.logger.debug(f"Added light type {name} ({light_type.id})")
        
        result = batch_df.copy()
        result['catalog_id'] = ids
        return result
