from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd

from pwvd_analyzer.errors import InvalidShapeError


def read_signal(file_path: str | Path) -> np.ndarray:
    """Read a 1D signal from disk.

    Supported layouts:
      - ``.npy``: a 1D (or row/column) real or complex array
      - ``.txt``/``.csv``/other ASCII: one column (real samples) or two columns
        (real, imaginary); whitespace or comma separated, ``#`` comments

    Returns
    -------
    np.ndarray
        float64 or complex128 vector.
    """
    path = Path(file_path).expanduser().resolve()
    if not path.exists():
        raise FileNotFoundError(str(path))

    if path.suffix.lower() == ".npy":
        x = np.load(path, allow_pickle=False)
        if x.ndim > 1 and sum(d != 1 for d in x.shape) > 1:
            raise InvalidShapeError(f"{path.name}: expected a vector, got shape {x.shape}", label="signal")
        return np.asarray(x).reshape(-1)

    mat = _load_ascii(path)
    ncols = mat.shape[1]
    if ncols == 1:
        return mat[:, 0].copy()
    if ncols == 2:
        return mat[:, 0] + 1j * mat[:, 1]
    raise InvalidShapeError(
        f"{path.name}: ASCII signal must have 1 (real) or 2 (real, imag) columns, got {ncols}",
        label="signal",
    )


def _load_ascii(path: Path) -> np.ndarray:
    """
    Load ASCII (txt/csv) into a float64 matrix.

    Whitespace separation is tried first, then CSV.
    """
    try:
        df = pd.read_csv(path, sep=r"\s+", engine="python", header=None, comment="#")
        if df.shape[1] == 1 and df.iloc[:, 0].dtype == object:
            # "1.0,2.0" lines come through as one text column
            df = pd.read_csv(path, sep=",", engine="python", header=None, comment="#")
    except pd.errors.EmptyDataError as exc:
        raise ValueError(f"{path.name}: empty file") from exc
    except pd.errors.ParserError:
        df = pd.read_csv(path, sep=",", engine="python", header=None, comment="#")

    return df.to_numpy(dtype=np.float64)
