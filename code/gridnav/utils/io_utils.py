"""
I/O utilities for saving run outputs as JSON and CSV.
"""

import os
import json
import logging
from typing import Dict

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


def load_json(file_path: str) -> Dict:
    """Load JSON data from a file."""
    with open(file_path, 'r') as f:
        return json.load(f)


def save_json(data: Dict, file_path: str, indent: int = 4):
    """Save data to a JSON file."""
    directory = os.path.dirname(file_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(file_path, 'w') as f:
        json.dump(ensure_serializable(data), f, indent=indent)


def save_trace_to_csv(trace: pd.DataFrame, file_path: str) -> None:
    """Save a simulation trace to CSV."""
    if trace.empty:
        logger.warning(f"Trace is empty, nothing saved to {file_path}")
        return
    directory = os.path.dirname(file_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    trace.to_csv(file_path, index=False)
    logger.info(f"Saved {len(trace)} trace rows to {file_path}")


def load_trace_from_csv(file_path: str) -> pd.DataFrame:
    trace = pd.read_csv(file_path)
    trace['agent_id'] = trace['agent_id'].astype(str)
    return trace


def ensure_serializable(obj):
    """Ensure object is JSON serializable."""
    if isinstance(obj, np.integer):
        return int(obj)
    elif isinstance(obj, np.floating):
        return float(obj)
    elif isinstance(obj, np.ndarray):
        return obj.tolist()
    elif isinstance(obj, dict):
        return {str(k): ensure_serializable(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [ensure_serializable(i) for i in obj]
    return obj
