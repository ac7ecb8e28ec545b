# utils/graph_export.py
# This file is part of Execgraph - Memory-Model Execution Graphs
#
# Hands rendered DOT text to Graphviz for layout and image output

import os
import subprocess
from typing import Optional

from utils.logger import get_logger

# Conditional import of graphviz
try:
    import graphviz

    GRAPHVIZ_AVAILABLE = True
except ImportError:
    GRAPHVIZ_AVAILABLE = False

logger = get_logger()

EXPORT_OUTPUT_FOLDER = "execution_graphs"


def export_graph(
    dot_source: str,
    base_filename: str,
    fmt: str = "svg",
    directory: str = EXPORT_OUTPUT_FOLDER,
) -> Optional[str]:
    """
    Lays out and renders DOT text with the Graphviz `dot` engine.
    The image is written to `directory`, which is created if missing.

    Args:
        dot_source: Complete DOT description, e.g. from GraphRenderer.render().
        base_filename: The base name for the output file.
        fmt: The output format for the image (e.g., "png", "svg").
        directory: Folder receiving the image.

    Returns:
        Path of the written image, or None if Graphviz is unavailable or failed.
    """
    if not GRAPHVIZ_AVAILABLE:
        logger.warning("Graphviz library not installed. Skipping graph export. "
                       "To enable, install graphviz: pip install graphviz")
        return None

    if not os.path.exists(directory):
        try:
            os.makedirs(directory)
            logger.info(f"Created directory for execution graphs: {directory}")
            output_path = os.path.join(directory, base_filename)
        except OSError as e:
            logger.error(f"Could not create directory {directory}: {e}. "
                         f"Saving to current directory instead.")
            output_path = base_filename  # Fallback
    else:
        output_path = os.path.join(directory, base_filename)

    source = graphviz.Source(dot_source, format=fmt)
    try:
        written = source.render(output_path, view=False, cleanup=True)
    except (graphviz.ExecutableNotFound, subprocess.CalledProcessError, OSError) as e:
        logger.export_result(False, f"Failed to render execution graph to {output_path}.{fmt}: {e}. "
                                    "Ensure Graphviz executables (dot) are in your system's PATH.")
        return None

    logger.export_result(True, f"Execution graph saved to {written}")
    return written
