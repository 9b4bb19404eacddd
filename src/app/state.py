from typing import Dict, Any, List, Optional
from pydantic import BaseModel
from ..core.schema_internal import RenameConfig


class ConformerState(BaseModel):
    config: RenameConfig
    entries: List[str] = []
    results: List[Dict[str, Any]] = []
    errors: List[str] = []
    listing_failed: bool = False
    summary: Dict[str, int] = {}
    log_file: Optional[str] = None
