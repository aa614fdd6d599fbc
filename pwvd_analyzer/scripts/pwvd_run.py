"""Command-line PWVD computation.

Example::

    python -m pwvd_analyzer.scripts.pwvd_run chirp.txt --window 63 --step 2 --order 4 \
        --out chirp_pwvd.csv --plot chirp_pwvd.png
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Sequence

import numpy as np

from pwvd_analyzer.analysis.distribution import pwvd_from_request
from pwvd_analyzer.errors import PwvdError
from pwvd_analyzer.ingest.signal_reader import read_signal
from pwvd_analyzer.models.parameters import PwvdRequest
from pwvd_analyzer.models.results import DistributionResult

logger = logging.getLogger(__name__)


EXPORT_SUFFIXES = (".csv", ".npy")


def _write_result(result: DistributionResult, path: Path, *, fs: float) -> None:
    suffix = path.suffix.lower()
    if suffix == ".npy":
        np.save(path, result.matrix)
    elif suffix == ".csv":
        result.to_frame(fs).to_csv(path)
    else:
        raise ValueError(f"Unknown export format: {suffix!r} (use .csv or .npy)")


def main(argv: Optional[Sequence[str]] = None) -> int:
    import argparse
    import textwrap

    p = argparse.ArgumentParser(
        prog="python -m pwvd_analyzer.scripts.pwvd_run",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=textwrap.dedent(
            """\
            Compute the polynomial Wigner-Ville distribution of a signal file.

            The file is .npy, or ASCII with one column (real samples) or two
            columns (real, imaginary).
            """
        ),
    )

    p.add_argument("signal", help="Signal file (.npy, .txt or .csv)")
    p.add_argument("--window", type=float, required=True, help="Lag-window length in samples")
    p.add_argument("--step", type=float, required=True, help="Time step between analysed instants")
    p.add_argument("--order", type=float, required=True, help="Interpolation order (rounded up to a power of two)")
    p.add_argument("--fft-length", type=float, default=None, help="FFT length (default: window length)")
    p.add_argument("--analytic", action="store_true", help="Analyse the analytic signal of a real input")
    p.add_argument("--workers", type=int, default=None, help="Worker threads for the per-instant loop")
    p.add_argument("--fs", type=float, default=1.0, help="Sampling frequency used to label the axes")
    p.add_argument("--out", default=None, help="Write the matrix to .csv (labelled) or .npy")
    p.add_argument("--plot", default=None, help="Save an image of the distribution (e.g. .png)")
    p.add_argument("--provenance", default=None, help="Write request and normalized parameters as JSON")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    ns = p.parse_args(list(argv) if argv is not None else None)
    if ns.out and Path(ns.out).suffix.lower() not in EXPORT_SUFFIXES:
        p.error(f"Unknown export format: {Path(ns.out).suffix!r} (use .csv or .npy)")

    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    request = PwvdRequest(
        window_length=ns.window,
        time_step=ns.step,
        poly_order=ns.order,
        transform_length=ns.fft_length,
        analytic=bool(ns.analytic),
        workers=ns.workers,
    )

    try:
        x = read_signal(ns.signal)
        result = pwvd_from_request(x, request)
    except PwvdError as exc:
        logger.error("[%s] %s", exc.label, exc)
        return 2
    except (OSError, ValueError) as exc:
        logger.error("[signal] %s: %s", ns.signal, exc)
        return 2

    prm = result.params
    print(
        f"PWVD: N={prm.signal_length} window={prm.window_length} step={prm.time_step} "
        f"order={prm.poly_order} fft={prm.radix_length} -> matrix {result.shape[0]}x{result.shape[1]}"
    )

    if ns.out:
        out = Path(ns.out)
        _write_result(result, out, fs=ns.fs)
        print(f"wrote: {out}")
    if ns.plot:
        import matplotlib

        matplotlib.use("Agg")
        from pwvd_analyzer.presentation.plots import save_distribution_plot

        img = save_distribution_plot(result, ns.plot, fs=ns.fs)
        print(f"wrote: {img}")
    if ns.provenance:
        prov = Path(ns.provenance)
        prov.write_text(
            json.dumps({"request": request.to_dict(), "parameters": prm.to_dict()}, indent=2),
            encoding="utf-8",
        )
        print(f"wrote: {prov}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
