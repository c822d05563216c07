"""
File output for rendered XML documents.
"""

import logging
from pathlib import Path

from xmlentity.exceptions import XMLFileError

logger = logging.getLogger(__name__)


def write_xml_file(directory: str | Path, file_name: str, content: str) -> Path:
    """
    Write rendered XML `content` to `directory/file_name`.

    The directory is created, including parents, when it does not exist.

    Params:
        directory: Target directory
        file_name: Name of the file inside `directory`
        content: Text to write (UTF-8)

    Returns:
        Path of the written file

    Raises:
        XMLFileError: If `directory` exists but is not a directory, or cannot be created
    """
    target_dir = Path(directory)
    if not target_dir.exists():
        try:
            target_dir.mkdir(parents=True)
        except OSError as e:
            raise XMLFileError(
                str(directory), f"The directory {directory} could not be created."
            ) from e
    elif not target_dir.is_dir():
        raise XMLFileError(str(directory), f"The path {directory} is not a directory.")

    path = target_dir / file_name
    path.write_text(content, encoding="utf-8")
    logger.info("Wrote XML document to %s", path)
    return path
