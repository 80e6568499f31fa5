import pytest
from PIL import Image


@pytest.fixture
def gallery(tmp_path):
    """
    A folder holding two real images, one text file and one subfolder:
      x.png, z.JPG, y.txt, sub/
    """
    root = tmp_path / "gallery"
    root.mkdir()
    Image.new("RGB", (4, 4), (255, 0, 0)).save(root / "x.png")
    Image.new("RGB", (4, 4), (0, 0, 255)).save(root / "z.JPG", format="JPEG")
    (root / "y.txt").write_text("notes")
    (root / "sub").mkdir()
    return root


@pytest.fixture
def target_dir(tmp_path):
    d = tmp_path / "library"
    d.mkdir()
    return d
