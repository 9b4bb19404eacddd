from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class RenameConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    selected_index: Optional[int] = Field(default=None, ge=0)
    dry_run: bool = False
    list_numbers: bool = False
    show_help: bool = False
    verbose: bool = False
    quiet: bool = False
    log_dir: Optional[str] = None  # None: no log file, no summary json
