"""test suite for domain models."""
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pydantic import ValidationError

from cdnjs_releases.domain.models import (
    LookupRequest,
    RegistryAsset,
    RegistryResponse,
    Release,
    ReleaseResult,
)


class TestLookupRequest:
    def test_package_only(self):
        request = LookupRequest.parse("jquery")
        assert request.package_name == "jquery"
        assert request.asset_path == ""

    def test_package_and_file(self):
        request = LookupRequest.parse("jquery/jquery.min.js")
        assert request.package_name == "jquery"
        assert request.asset_path == "jquery.min.js"

    def test_nested_asset_path_is_joined_verbatim(self):
        request = LookupRequest.parse("bootstrap/css/bootstrap.min.css")
        assert request.package_name == "bootstrap"
        assert request.asset_path == "css/bootstrap.min.css"

    def test_trailing_slash_gives_empty_asset(self):
        request = LookupRequest.parse("lodash/")
        assert request.package_name == "lodash"
        assert request.asset_path == ""

    def test_double_slash_is_kept(self):
        request = LookupRequest.parse("lib//a.js")
        assert request.asset_path == "/a.js"


class TestRegistryResponse:
    def test_full_payload(self):
        response = RegistryResponse.model_validate({
            "name": "lib",
            "homepage": "https://lib.dev",
            "repository": {"type": "git", "url": "https://github.com/lib/lib.git"},
            "assets": [{"version": "1.0", "files": ["a.js"], "sri": {}}],
        })
        assert response.homepage == "https://lib.dev"
        assert response.repository.url == "https://github.com/lib/lib.git"
        assert response.assets == [RegistryAsset(version="1.0", files=["a.js"])]

    def test_empty_payload(self):
        response = RegistryResponse.model_validate({})
        assert response.homepage is None
        assert response.repository is None
        assert response.assets is None

    def test_repository_without_url(self):
        response = RegistryResponse.model_validate({"repository": {"type": "git"}})
        assert response.repository.type == "git"
        assert response.repository.url is None

    def test_asset_without_version_is_rejected(self):
        with pytest.raises(ValidationError):
            RegistryResponse.model_validate({"assets": [{"files": ["a.js"]}]})


class TestReleaseResult:
    def test_releases_default_to_empty_list(self):
        result = ReleaseResult()
        assert result.releases == []

    def test_to_dict_omits_missing_metadata(self):
        result = ReleaseResult(releases=[Release(version="1.0")])
        assert result.to_dict() == {"releases": [{"version": "1.0"}]}

    def test_to_dict_uses_source_url_alias(self):
        result = ReleaseResult(
            releases=[],
            homepage="https://x",
            source_url="https://github.com/x/x",
        )
        assert result.to_dict() == {
            "releases": [],
            "homepage": "https://x",
            "sourceUrl": "https://github.com/x/x",
        }

    def test_populate_by_alias(self):
        result = ReleaseResult(sourceUrl="https://github.com/x/x")
        assert result.source_url == "https://github.com/x/x"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
