import pytest
import responses

from agcore import jadeite
from agcore.jadeite import JadeiteError, JadeiteLatest, get_latest, get_metadata, get_version, is_installed
from agcore.jadeite_metadata import PatchStatusVariant
from agcore.version import Version


@pytest.fixture(autouse=True)
def clear_caches():
    get_latest.cache_clear()
    get_metadata.cache_clear()
    yield
    get_latest.cache_clear()
    get_metadata.cache_clear()


def test_is_installed(tmp_path):
    assert is_installed(tmp_path) is False
    (tmp_path / ".version").write_bytes(bytes([1, 2, 3]))
    assert is_installed(tmp_path) is True


def test_get_version(tmp_path):
    (tmp_path / ".version").write_bytes(bytes([1, 2, 3]))
    assert get_version(tmp_path) == Version(1, 2, 3)


def test_get_version_short_file(tmp_path):
    (tmp_path / ".version").write_bytes(bytes([1]))
    with pytest.raises(ValueError):
        get_version(tmp_path)


def test_get_version_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        get_version(tmp_path)


def test_get_latest():
    body = {"tag_name": "v1.1.12", "assets": [{"browser_download_url": "https://example.com/jadeite.zip"}]}
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, jadeite.REPO_API_URI, json=body)
        latest = get_latest()
        assert get_latest() == latest
        assert len(rsps.calls) == 1
    assert latest == JadeiteLatest(Version(1, 1, 12), "https://example.com/jadeite.zip")


def test_get_latest_without_prefix():
    body = {"tag_name": "2.0.0", "assets": [{"browser_download_url": "https://example.com/j.zip"}]}
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, jadeite.REPO_API_URI, json=body)
        assert get_latest().version == Version(2, 0, 0)


def test_get_latest_bad_tag():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, jadeite.REPO_API_URI, json={"tag_name": "latest", "assets": []})
        with pytest.raises(JadeiteError):
            get_latest()


def test_get_latest_no_assets():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, jadeite.REPO_API_URI, json={"tag_name": "v1.0.0", "assets": []})
        with pytest.raises(JadeiteError):
            get_latest()


def test_get_metadata_falls_back_to_mirror():
    document = {
        "jadeite": {"version": "3.0.5"},
        "games": {"hsr": {"global": {"status": "verified", "version": "1.2.0"}}},
    }
    primary, mirror = jadeite.METADATA_URIS
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, primary, body="<html>not json</html>")
        rsps.add(responses.GET, mirror, json=document)
        metadata = get_metadata()
    assert metadata.jadeite.version == Version(3, 0, 5)
    assert metadata.games.hsr.global_.status is PatchStatusVariant.VERIFIED
    assert metadata.games.hsr.global_.version == Version(1, 2, 0)


def test_get_metadata_all_mirrors_fail():
    with responses.RequestsMock(assert_all_requests_are_fired=False):
        with pytest.raises(JadeiteError):
            get_metadata()