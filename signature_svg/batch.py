"""
Batch conversion of saved signature pad traces into SVG files.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from tqdm import tqdm

from signature_svg.errors import SignatureError
from signature_svg.signature import SignatureToSvg
from signature_svg.utils.config import StrokeConfig

logger = logging.getLogger(__name__)


def convert_file(
    input_path: Union[str, Path],
    output_dir: Union[str, Path],
    config: Optional[StrokeConfig] = None,
    compress: bool = False
) -> Path:
    """
    Convert one JSON trace file into an SVG (or gzipped SVGZ) file.

    Args:
        input_path: Path to a JSON file holding signature pad output
        output_dir: Directory to write the image into
        config: Stroke styling (defaults when None)
        compress: Write gzip-compressed ``.svgz`` instead of ``.svg``

    Returns:
        Path to the written file
    """
    input_path = Path(input_path)
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    options = (config or StrokeConfig()).as_options()
    signature = SignatureToSvg(input_path.read_bytes(), options)

    if compress:
        output_path = output_dir / f"{input_path.stem}.svgz"
        output_path.write_bytes(signature.get_image_gz())
    else:
        output_path = output_dir / f"{input_path.stem}.svg"
        output_path.write_text(signature.get_image(), encoding="utf-8")

    logger.debug(f"Wrote {output_path} ({len(signature)} segments)")
    return output_path


def collect_inputs(input_path: Union[str, Path]) -> List[Path]:
    """A single JSON file, or every ``*.json`` file below a directory."""
    input_path = Path(input_path)
    if not input_path.exists():
        raise FileNotFoundError(f"Input not found: {input_path}")
    if input_path.is_file():
        return [input_path]
    return sorted(path for path in input_path.rglob("*.json") if path.is_file())


def convert_all(
    input_path: Union[str, Path],
    output_dir: Union[str, Path],
    config: Optional[StrokeConfig] = None,
    compress: bool = False
) -> List[Path]:
    """
    Convert every trace found at ``input_path``.

    Files that fail to decode or cannot be read are logged and skipped.

    Returns:
        List of input files that failed
    """
    inputs = collect_inputs(input_path)
    logger.info(f"Found {len(inputs)} trace files to convert")

    failed = []
    for path in tqdm(inputs, desc="Converting"):
        try:
            convert_file(path, output_dir, config=config, compress=compress)
        except (SignatureError, OSError) as e:
            logger.error(f"Failed to convert {path}: {e}")
            failed.append(path)

    logger.info(f"Converted {len(inputs) - len(failed)}/{len(inputs)} traces")
    return failed
