from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Any

class LookupRequest(BaseModel):
    """a parsed lookup name: `<package>` or `<package>/<asset path>`."""
    package_name: str
    asset_path: str = ""

    @classmethod
    def parse(cls, lookup_name: str) -> "LookupRequest":
        # the asset path keeps any embedded slashes, it is matched as one string
        package_name, _, asset_path = lookup_name.partition("/")
        return cls(package_name=package_name, asset_path=asset_path)

class RegistryAsset(BaseModel):
    """one published version and the files it ships."""
    version: str
    files: List[str] = Field(default_factory=list)

class RegistryRepository(BaseModel):
    type: Optional[str] = None
    url: Optional[str] = None

class RegistryResponse(BaseModel):
    """raw library payload as returned by the registry."""
    homepage: Optional[str] = None
    repository: Optional[RegistryRepository] = None
    assets: Optional[List[RegistryAsset]] = None

class Release(BaseModel):
    version: str

class ReleaseResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    releases: List[Release] = Field(default_factory=list)
    homepage: Optional[str] = None
    source_url: Optional[str] = Field(default=None, alias="sourceUrl")

    def to_dict(self) -> Dict[str, Any]:
        """serialise with camel-case keys, leaving out unset metadata."""
        return self.model_dump(by_alias=True, exclude_none=True)
