import json

import pytest

from image_browser import main as cli


def _run(capsys, *argv):
    code = cli.main(list(argv))
    out = capsys.readouterr().out
    return code, json.loads(out)


def test_images_command(capsys, gallery):
    code, result = _run(capsys, "images", str(gallery))
    assert code == 0
    assert sorted(r["name"] for r in result) == ["x.png", "z.JPG"]


def test_error_exit_code_and_payload(capsys, gallery):
    code, result = _run(capsys, "files", str(gallery / "y.txt"))
    assert code == 1
    assert result["error"]["kind"] == "NotADirectory"


def test_copy_collision(capsys, gallery, target_dir):
    (target_dir / "x.png").write_bytes(b"old")
    code, result = _run(capsys, "copy", str(gallery / "x.png"), str(target_dir))
    assert code == 1
    assert result["error"]["kind"] == "TargetAlreadyExists"
    assert (target_dir / "x.png").read_bytes() == b"old"


def test_batch_with_report(capsys, tmp_path, gallery, target_dir):
    pending_file = tmp_path / "pending.json"
    pending_file.write_text(json.dumps([
        {"imagePath": str(gallery / "x.png"), "targetFolder": str(target_dir), "imageName": "x.png"},
        {"imagePath": str(gallery / "gone.png"), "targetFolder": str(target_dir)},
    ]))
    report = tmp_path / "report.csv"

    code, result = _run(capsys, "batch", str(pending_file), "--report-csv", str(report))

    assert code == 0
    assert result["succeeded"] == 1
    assert result["failed"] == 1
    assert result["failedFiles"][0].startswith('Failed to copy "gone.png"')
    assert result["message"] == "Successfully copied 1 file! 1 file failed to copy."
    assert report.exists()


def test_load_pending_defaults_image_name(tmp_path):
    pending_file = tmp_path / "pending.json"
    pending_file.write_text(json.dumps([{"imagePath": "/a/b/c.png", "targetFolder": "/t"}]))
    assert cli.load_pending(pending_file)[0].image_name == "c.png"


def test_batch_empty_list(capsys, tmp_path):
    pending_file = tmp_path / "pending.json"
    pending_file.write_text("[]")

    code, result = _run(capsys, "batch", str(pending_file))

    assert code == 0
    assert result["succeeded"] == 0
    assert result["message"] == "No files to copy"


@pytest.mark.parametrize("content", [
    "{not json",
    json.dumps([{"targetFolder": "/t"}]),
    json.dumps(["just-a-path.png"]),
])
def test_batch_malformed_pending_file(capsys, tmp_path, content):
    pending_file = tmp_path / "pending.json"
    pending_file.write_text(content)

    code, result = _run(capsys, "batch", str(pending_file))

    assert code == 1
    assert result["error"]["kind"] == "InvalidPendingFile"


def test_batch_missing_pending_file(capsys, tmp_path):
    code, result = _run(capsys, "batch", str(tmp_path / "absent.json"))
    assert code == 1
    assert result["error"]["kind"] == "InvalidPendingFile"
