import logging
from collections.abc import Iterable
from pathlib import Path

from asciify.errors import ArtifactWriteError

log = logging.getLogger(__name__)

SUFFIX = ".txt"


def artifact_path(source: str | Path) -> Path:
    """Output path for an image: the full source path with ``.txt`` appended."""
    return Path(str(source) + SUFFIX)


def _remove_partial(target: Path) -> None:
    try:
        target.unlink(missing_ok=True)
    except OSError as exc:
        log.error("Could not remove partial output %s: %s", target, exc)
        raise ArtifactWriteError(f"Could not remove partial output file: {target}") from exc


def write_artifact(source: str | Path, rows: Iterable[bytes]) -> Path:
    """Write glyph rows to the artifact for ``source``, replacing any old one.

    A failure part way through removes the partial file before raising.
    """
    target = artifact_path(source)
    try:
        f = target.open("wb")
    except OSError as exc:
        raise ArtifactWriteError(f"Could not open output file {target}: {exc}") from exc

    try:
        with f:
            for row in rows:
                f.write(row)
    except OSError as exc:
        _remove_partial(target)
        raise ArtifactWriteError(f"Could not write output file {target}: {exc}") from exc

    log.debug("Wrote %s", target)
    return target
