import pytest

from agcore.wine_patches import mfc140_is_installed, vcrun2015_is_installed


@pytest.mark.parametrize("check", [mfc140_is_installed, vcrun2015_is_installed])
def test_empty_prefix(tmp_path, check):
    assert check(tmp_path) is False


@pytest.mark.parametrize("check", [mfc140_is_installed, vcrun2015_is_installed])
def test_prefix_with_library(tmp_path, check):
    system32 = tmp_path / "drive_c" / "windows" / "system32"
    system32.mkdir(parents=True)
    (system32 / "mfc140.dll").write_bytes(b"MZ")
    assert check(str(tmp_path)) is True


@pytest.mark.parametrize("check", [mfc140_is_installed, vcrun2015_is_installed])
def test_other_library_is_not_enough(tmp_path, check):
    system32 = tmp_path / "drive_c" / "windows" / "system32"
    system32.mkdir(parents=True)
    (system32 / "msvcp140.dll").write_bytes(b"MZ")
    assert check(tmp_path) is False