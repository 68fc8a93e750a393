import argparse
import logging
import sys

from coordinator import CalculatorSession
from models.errors import DegenerateSegment, MissingInput, NonFiniteInput, PrecisionLoss
from models.mode import Mode
from utils.image_io import build_output_name
from utils.input_validation import FIELD_NAMES
from utils.logging_config import init_logging
from visualization.save_outputs import save_all_outputs

from config import get_active_params

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MISSING_INPUT = 1
EXIT_INVALID_INPUT = 2
EXIT_DEGENERATE = 3
EXIT_PRECISION_LOSS = 4


def build_parser() -> argparse.ArgumentParser:
    params = get_active_params()
    parser = argparse.ArgumentParser(
        prog="lineraster",
        description="Rasterize the segment (X1, Y1) → (X2, Y2) with the basic "
                    "slope-intercept walk or the DDA algorithm.",
    )
    for name in FIELD_NAMES:
        parser.add_argument(name, nargs="?", default="", help=f"{name.upper()} coordinate")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in Mode],
        default=params["DEFAULT_MODE"],
        help="rasterization algorithm (default: %(default)s)",
    )
    parser.add_argument(
        "--output",
        default=params["OUTPUT_FOLDER"],
        help="folder for the chart image and CSV table (default: %(default)s)",
    )
    parser.add_argument("--no-save", action="store_true", help="only print the result table")
    parser.add_argument("--log-dir", default=None, help="folder for run logs")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on the console")
    return parser


def run(args: argparse.Namespace) -> int:
    """
    Runs one calculation:
      1. Fill the input fields & select the mode
      2. Validate / parse / rasterize
      3. Print the result table
      4. Save chart + table
    """

    # ------------------------------
    # STEP 1 — INPUTS
    # ------------------------------
    session = CalculatorSession()
    session.set_mode(args.mode)
    session.set_fields(**{name: getattr(args, name) for name in FIELD_NAMES})

    # ------------------------------
    # STEP 2 — CALCULATE
    # ------------------------------
    try:
        points = session.calculate()
    except MissingInput as e:
        print(f"[ERROR] {e} (missing: {', '.join(e.missing)})")
        return EXIT_MISSING_INPUT
    except NonFiniteInput as e:
        print(f"[ERROR] {e}")
        return EXIT_INVALID_INPUT
    except DegenerateSegment as e:
        print(f"[ERROR] {e}")
        return EXIT_DEGENERATE
    except PrecisionLoss as e:
        print(f"[ERROR] {e}")
        return EXIT_PRECISION_LOSS

    # ------------------------------
    # STEP 3 — RESULT TABLE
    # ------------------------------
    display = session.coordinator.display
    print(display.render_table())

    if not points:
        print("[WARN] x1 > x2: the basic walk produces no points.")

    # ------------------------------
    # STEP 4 — SAVE OUTPUTS
    # ------------------------------
    if not args.no_save:
        run_id = build_output_name(session.mode, session.last_segment)
        paths = save_all_outputs(args.output, run_id, display)
        for kind, path in paths.items():
            print(f"[OK] Saved {kind}: {path}")

    return EXIT_OK


def main(argv=None) -> int:
    """
    Main entry point:
      - Parses the command line
      - Sets up logging
      - Runs one calculation
    """
    args = build_parser().parse_args(argv)
    init_logging(args.log_dir, verbose=args.verbose)
    logger.info("Run: mode=%s fields=%s", args.mode, [getattr(args, n) for n in FIELD_NAMES])
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
