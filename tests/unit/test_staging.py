"""Image staging tests."""

import shutil

import pytest

from component_forge.core import ImageStaging


@pytest.mark.unit
def test_stage_writes_image():
    with ImageStaging() as staging:
        first = staging.stage(b"one")
        second = staging.stage(b"two")
        assert first.read_bytes() == b"one"
        assert first.name == "reference_1.png"
        assert second.name == "reference_2.png"
        directory = staging.directory

    assert staging.closed
    assert not directory.exists()


@pytest.mark.unit
def test_cleanup_on_error():
    """Test the staging directory is removed when the block raises."""
    with pytest.raises(RuntimeError, match="upstream"):
        with ImageStaging() as staging:
            staging.stage(b"data")
            directory = staging.directory
            raise RuntimeError("upstream failure")
    assert not directory.exists()


@pytest.mark.unit
def test_close_is_idempotent():
    staging = ImageStaging()
    staging.close()
    staging.close()
    assert staging.closed


@pytest.mark.unit
def test_stage_after_close_raises():
    staging = ImageStaging()
    staging.close()
    with pytest.raises(RuntimeError, match="closed"):
        staging.stage(b"data")


@pytest.mark.unit
def test_cleanup_failure_is_not_raised(monkeypatch):
    staging = ImageStaging()
    directory = staging.directory

    def failing_rmtree(path):
        raise OSError("busy")

    monkeypatch.setattr("component_forge.core.staging.shutil.rmtree", failing_rmtree)
    staging.close()
    assert staging.closed

    monkeypatch.undo()
    shutil.rmtree(directory)
