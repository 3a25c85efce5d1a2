# agcore

Building blocks for a game launcher: three-part version numbers,
human-readable sizes, file integrity checks, discovery of leftover files,
jadeite patch metadata, git-synced folders and checks on Wine prefixes.

## Installation

```
pip install agcore
```

For running the tests:

```
pip install "agcore[test]"
pytest
```

## Versions

```python
from agcore.version import Version

v = Version.from_str("1.10.2")
print(v)                    # 1.10.2
print(v.to_plain_string())  # 1102
assert v == "1.10.2"
assert Version.from_str("1.0") is None
assert Version() == "0.0.0"
```

Each component must lie in 0..=255; `Version.from_str` returns `None` for
anything that is not three such numbers separated by dots. Versions
compare with each other by their numbers, and with strings by their text
form (so the comparison with a string is a text comparison).

## Sizes

```python
from agcore.prettify import prettify_bytes

prettify_bytes(512)   # "512 B"
prettify_bytes(2048)  # "2.00 KB"
```

Sizes above a kilobyte, megabyte or gigabyte are shown in KB, MB or GB
with two decimals. Negative counts raise `ValueError`.

## Integrity checks

```python
from agcore.repairer import IntegrityFile, get_unused_files

entry = IntegrityFile(
    path="UnityPlayer.dll",
    md5="8c8c3d845b957e4cb84c662bed44d072",
    size=33466104,
    base_url="https://example.com/game",
)

entry.fast_verify("/games/mygame")  # compares sizes only
entry.verify("/games/mygame")       # compares sizes, then MD5 hashes

leftovers = get_unused_files("/games/mygame", ["UnityPlayer.dll"], ["logs"])
```

Both checks return `False` when the file is missing or unreadable.
`get_unused_files` walks the game folder, skips every entry whose name
contains one of the skip strings (skipped folders are not entered), and
returns the files that are not in the used list. Used files may be given
relative to the game folder or as absolute paths.

## Patch metadata

```python
from agcore.jadeite import get_metadata, get_latest, is_installed, get_version
from agcore.version import Version

metadata = get_metadata()
status = metadata.games.hsr.global_.get_status(Version.from_str("1.2.0"))

latest = get_latest()
print(latest.version, latest.download_uri)

if is_installed("/path/to/patch"):
    print(get_version("/path/to/patch"))
```

`get_metadata` tries each address in `METADATA_URIS` in turn and parses
the first JSON answer with `JadeiteMetadata.from_json`; `get_latest` asks
the release API for the newest release. Both cache their result and raise
`JadeiteError` when nothing usable comes back. `get_version` reads the
three version bytes stored in the folder's `.version` file.

The metadata classes live in `agcore.jadeite_metadata`: `JadeiteMetadata`,
`PatchMetadata`, `GamesMetadata`, `Hi3rdMetadata`, `HsrMetadata`,
`PatchStatus` and `PatchStatusVariant`. Missing or malformed fields fall
back to defaults (version 0.0.0, status unverified).

`PatchStatus.get_status` returns a `PatchStatusVariant`. When the game is
newer than the version the status was recorded for, a verified patch is
reported as unverified and other states stay as they are; when the game
is older, the result is unverified.

## Git-synced folders

```python
from agcore.git_sync import RemoteGitSync

repo = RemoteGitSync("/path/to/folder")
new_commits = repo.sync("https://example.com/repo.git")
repo.is_sync(["https://example.com/repo.git"])
```

`RemoteGitSync` runs the `git` command: `sync` clones the remote if the
folder does not exist, otherwise fetches and hard-resets to `origin/HEAD`,
and returns the subjects of the commits brought in. `is_sync_with`
compares the local `HEAD` with the remote's; `is_sync` returns the first
remote that matches, or `None`.

## Interfaces

`agcore.game.GameExt` and `agcore.version_diff.VersionDiffExt` are
abstract base classes for a game installation and for a difference
between versions. `VersionDiffExt.file_name` derives the file name from
the downloading URI, falling back to `index.html`.

## Wine prefixes

```python
from agcore.wine_patches import mfc140_is_installed, vcrun2015_is_installed

mfc140_is_installed("/path/to/prefix")
vcrun2015_is_installed("/path/to/prefix")
```

## What it does not do

The package only inspects and reports. It does not download or repair
game files, install the jadeite patch, or install the MFC or VC++ runtime
libraries into a Wine prefix. It has no command-line program.