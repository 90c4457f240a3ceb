import os
import pytest
import sys
from pathlib import Path

from PIL import Image

# Add project root to sys.path
ROOT_DIR = Path(__file__).parents[1]
sys.path.insert(0, str(ROOT_DIR))

from app_unified import create_app

FIXED_MTIME = 1700000000

def _touch(path: Path, data: bytes = b"x", mtime: float = FIXED_MTIME):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    os.utime(path, (mtime, mtime))
    return path

@pytest.fixture
def content(tmp_path):
    """
    content/
      Alpha2/Final/{clip10.mp4, clip2.mp4, poster.jpg}
      Alpha2/ProjA/{shot1.png, shot10.png, shot2.png, notes.md, data.bin, tags.txt, Final/final.mp4}
      Alpha2/ProjB/
      alpha10/
      Beta/Final/readme.txt
    """
    root = tmp_path / "content"
    _touch(root / "Alpha2" / "Final" / "clip10.mp4")
    _touch(root / "Alpha2" / "Final" / "clip2.mp4")
    _touch(root / "Alpha2" / "Final" / "poster.jpg")

    proj = root / "Alpha2" / "ProjA"
    proj.mkdir(parents=True)
    Image.new("RGB", (640, 480), (200, 30, 30)).save(proj / "shot1.png")
    os.utime(proj / "shot1.png", (FIXED_MTIME, FIXED_MTIME))
    _touch(proj / "shot10.png")
    _touch(proj / "shot2.png")
    _touch(proj / "notes.md", b"# notes\n")
    _touch(proj / "data.bin", b"\x00\x01")
    _touch(proj / "tags.txt", "drone, night ,, night,city".encode("utf-8"))
    _touch(proj / "Final" / "final.mp4", b"video-bytes")

    (root / "Alpha2" / "ProjB").mkdir()
    (root / "alpha10").mkdir()
    _touch(root / "Beta" / "Final" / "readme.txt")
    return root

@pytest.fixture
def archive_dir(tmp_path):
    return tmp_path / "archives"

@pytest.fixture
def app(content, archive_dir):
    app = create_app({
        "CONTENT_ROOT": str(content),
        "MEDIA_PREFIX": "content",
        "ARCHIVE_TMP_DIR": str(archive_dir),
    })
    app.config['TESTING'] = True
    return app

@pytest.fixture
def client(app):
    return app.test_client()

@pytest.fixture
def runner(app):
    return app.test_cli_runner()
