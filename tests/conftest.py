import pytest


def write_file(path, size: int):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


@pytest.fixture
def tree(tmp_path):
    """
    root/
      a.bin        5
      b.bin        7
      sub/
        c.bin      11
        deeper/
          d.bin    13
      empty/
    """
    root = tmp_path / "root"
    write_file(root / "a.bin", 5)
    write_file(root / "b.bin", 7)
    write_file(root / "sub" / "c.bin", 11)
    write_file(root / "sub" / "deeper" / "d.bin", 13)
    (root / "empty").mkdir()
    return root


