# fakelang/config/schema.py
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field

from ..core.models import Language
from .paths import get_default_data_dir

class CipherConfig(BaseModel):
    data_dir: Optional[str] = None # Word lists and corpora; None -> <user data dir>/data
    cache_dir: Optional[str] = None # Persisted dictionaries and graphs; None -> data_dir
    default_language: Language = Language.ENGLISH
    generator: Literal["markov", "counter"] = "markov"
    seed: Optional[int] = None # Fixed seed makes dictionary builds reproducible
    markov_max_attempts: int = Field(default=1000, ge=1)
    dictionary_max_attempts: int = Field(default=10_000, ge=1)
    universal_resource_name: str = "UniversalFakeDictionary"

    def resolved_data_dir(self) -> Path:
        return Path(self.data_dir).expanduser() if self.data_dir else get_default_data_dir()

    def resolved_cache_dir(self) -> Path:
        return Path(self.cache_dir).expanduser() if self.cache_dir else self.resolved_data_dir()
