#!/usr/bin/env python3
"""Build per-chromosome-arm genetic distance tables for S. cerevisiae.

This script reads the SGD chromosomal feature table (``SGD_features.tab``),
keeps ORFs and centromeres, assigns every ORF to the left or right arm of
its chromosome, and computes the distance between every pair of ORFs that
share an arm.  Each (chromosome, arm) partition is written to its own CSV.

Outputs:
    - One CSV per chromosome arm, named ``<chromosome>-<arm>.csv``, with
      columns ``chromosome, arm, gene_id_a, gene_id_b, orf_id_a, orf_id_b,
      gene_name_a, gene_name_b, distance``

The cross join is quadratic in the number of ORFs per arm.  That is fine for
a single yeast genome (a few thousand ORFs) but does not scale to much
larger feature sets.

Usage:
    python -m scripts.update_genetic_distances \
        --from https://downloads.yeastgenome.org/curation/chromosomal_feature/SGD_features.tab \
        --outdir genetic_distances
"""

# Enable postponed evaluation of annotations (PEP 604 union syntax, etc.)
from __future__ import annotations

# Standard-library imports
import argparse  # command-line argument parsing
import csv  # quoting constants for the TSV reader
import gzip  # decompressing downloaded .gz tables
import io  # wrapping downloaded bytes for pandas
import logging  # structured log output instead of bare print()
import re  # regular expressions for chromosome-name sorting
import sys  # for sys.exit on validation failures
from collections import Counter, defaultdict  # tallies and grouping
from dataclasses import asdict, dataclass, field  # typed records
from pathlib import Path  # object-oriented filesystem paths
from typing import Callable, Iterable, Union  # collaborator signatures

# Third-party imports
import numpy as np  # vectorised coordinate arithmetic
import pandas as pd  # tabular data manipulation
import requests  # downloading the SGD feature table

# ---------------------------------------------------------------------------
# Configure module-level logger so all messages go to stderr
# ---------------------------------------------------------------------------
logger = logging.getLogger(__name__)  # create logger scoped to this module

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Where SGD publishes the current chromosomal feature table
SGD_FEATURES_URL: str = (
    "https://downloads.yeastgenome.org/curation/chromosomal_feature/"
    "SGD_features.tab"
)

# Default directory for the per-arm CSV files
DEFAULT_OUTDIR: Path = Path("genetic_distances")

# Seconds to wait for the SGD download before giving up
REQUEST_TIMEOUT: int = 120

# All sixteen columns of SGD_features.tab, in file order (no header row)
SGD_COLUMNS: list[str] = [
    "gene_id", "type", "qualifier", "orf_id", "gene_name", "gene_alias",
    "parent_feature_name", "secondary_sgd_id", "chromosome", "start", "stop",
    "strand", "genetic_position", "coordinate_version", "sequence_version",
    "gene_description",
]

# The subset of columns the distance calculation needs
FEATURE_COLUMNS: list[str] = [
    "gene_id", "type", "orf_id", "gene_name", "chromosome", "start", "stop",
    "strand",
]

# Columns a raw table must carry before it can be normalised
REQUIRED_COLUMNS: list[str] = [
    "gene_id", "type", "orf_id", "gene_name", "chromosome", "start", "stop",
]

# Plain integer coordinates only (no 12.5, no 1e3); 18 digits always fit int64
COORDINATE_PATTERN: str = r"-?\d{1,18}"

# Feature types that survive normalisation; everything else is discarded
ORF_TYPE: str = "ORF"
CENTROMERE_TYPE: str = "centromere"
RETAINED_TYPES: tuple[str, ...] = (ORF_TYPE, CENTROMERE_TYPE)

# Chromosome arms, in output order
LEFT_ARM: str = "left"
RIGHT_ARM: str = "right"
ARMS: tuple[str, ...] = (LEFT_ARM, RIGHT_ARM)

# Column order of every output partition
OUTPUT_COLUMNS: list[str] = [
    "chromosome", "arm", "gene_id_a", "gene_id_b", "orf_id_a", "orf_id_b",
    "gene_name_a", "gene_name_b", "distance",
]


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class MalformedFeatureError(ValueError):
    """A feature row (or the table itself) cannot be normalised."""


class CentromereError(ValueError):
    """One or more chromosomes lack exactly one centromere feature."""

    def __init__(self, problems: dict[str, str]) -> None:
        self.problems = dict(problems)  # chromosome -> human-readable reason
        details = "; ".join(
            f"chromosome {chrom}: {reason}" for chrom, reason in self.problems.items()
        )
        super().__init__(f"Cannot assign chromosome arms ({details})")


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Feature:
    """One normalised ORF or centromere row."""

    gene_id: str
    type: str
    orf_id: str | None
    gene_name: str | None
    chromosome: str
    min: int
    max: int


@dataclass(frozen=True)
class CentromereBound:
    chromosome: str
    cen_min: int
    cen_max: int


@dataclass(frozen=True)
class ArmAssignment:
    feature: Feature
    arm: str


@dataclass(frozen=True)
class GenePair:
    """Distance between two ORFs on the same chromosome arm."""

    chromosome: str
    arm: str
    gene_id_a: str
    gene_id_b: str
    orf_id_a: str | None
    orf_id_b: str | None
    gene_name_a: str | None
    gene_name_b: str | None
    distance: int


@dataclass
class ArmClassification:
    assignments: list[ArmAssignment] = field(default_factory=list)
    skipped: dict[str, str] = field(default_factory=dict)  # chromosome -> reason


@dataclass
class RunSummary:
    """What a pipeline run wrote, and which chromosomes it left out."""

    partitions: dict[str, int] = field(default_factory=dict)  # key -> rows
    skipped: dict[str, str] = field(default_factory=dict)  # chromosome -> reason


# Collaborator signatures: fetch a raw table, persist one partition
FetchTable = Callable[[Union[str, Path]], pd.DataFrame]
PersistTable = Callable[[pd.DataFrame, str], None]


# ---------------------------------------------------------------------------
# Chromosome ordering
# ---------------------------------------------------------------------------

# Mapping of individual Roman-numeral characters to integer values
_ROMAN_VALUES: dict[str, int] = {
    "I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000,
}


def _roman_to_int(roman: str) -> int:
    """Convert a Roman-numeral string (e.g. 'XVI') to an integer (16)."""
    total: int = 0
    prev: int = 0
    # Right to left so subtractive pairs (IV, IX, …) are handled
    for char in reversed(roman):
        value: int = _ROMAN_VALUES.get(char, 0)
        if value < prev:
            total -= value
        else:
            total += value
        prev = value
    return total


def chrom_sort_key(name: str) -> tuple[int, int, str]:
    """Return a sort key that orders yeast chromosomes biologically.

    SGD labels chromosomes with integers (``"1"`` … ``"16"``) while other
    sources use Roman numerals, with or without a ``chr`` prefix.  Both
    sort numerically; any other label sorts alphabetically after them.

    Parameters
    ----------
    name : str
        Chromosome label, e.g. ``"4"``, ``"IV"`` or ``"chrIV"``.

    Returns
    -------
    tuple[int, int, str]
        A three-element sort key: (priority-group, numeric-order, name).
    """
    # Strip an optional "chr" prefix before interpreting the label
    bare: str = re.sub(r"^chr", "", name, flags=re.IGNORECASE)

    if bare.isdigit():
        return (0, int(bare), name)  # SGD-style numeric label

    if re.fullmatch(r"[IVXLCDM]+", bare, re.IGNORECASE):
        return (0, _roman_to_int(bare.upper()), name)  # Roman numeral

    # Fallback for non-standard names (plasmids, mitochondrion, …)
    return (1, 0, name)


def partition_key(chromosome: str, arm: str) -> str:
    """Destination key for one (chromosome, arm) partition."""
    return f"{chromosome}-{arm}"


# ---------------------------------------------------------------------------
# Input reader
# ---------------------------------------------------------------------------

def read_sgd_features(
    source: str | Path,
    timeout: int = REQUEST_TIMEOUT,
) -> pd.DataFrame:
    """Read ``SGD_features.tab`` from a URL or a local file.

    The file is TAB-separated with no header row.  All values are read as
    strings; coordinates are validated later by :func:`normalize_features`.

    Parameters
    ----------
    source : str or Path
        An ``http(s)://`` URL or a filesystem path.  A ``.gz`` suffix means
        gzip-compressed content.
    timeout : int
        Download timeout in seconds (URLs only).

    Returns
    -------
    pd.DataFrame
        Columns: ``FEATURE_COLUMNS``.

    Raises
    ------
    requests.HTTPError
        If the server answers with an error status.
    """
    text_source: str = str(source)

    if text_source.startswith(("http://", "https://")):
        logger.info("Downloading SGD features from %s …", text_source)
        resp = requests.get(text_source, timeout=timeout)
        resp.raise_for_status()  # surface 4xx/5xx instead of parsing an error page

        content: bytes = resp.content
        if text_source.endswith(".gz"):
            content = gzip.decompress(content)
        handle = io.BytesIO(content)
    else:
        # pandas infers gzip compression from the file suffix
        handle = Path(source)

    raw: pd.DataFrame = pd.read_csv(
        handle,
        sep="\t",  # columns separated by TAB
        header=None,  # file has no header row
        names=SGD_COLUMNS,  # assign our own column names
        usecols=FEATURE_COLUMNS,  # drop descriptions, aliases, …
        dtype=str,  # parse coordinates ourselves
        quoting=csv.QUOTE_NONE,  # descriptions contain stray quote marks
    )

    logger.info("Read %d feature rows from %s", len(raw), text_source)

    return raw


# ---------------------------------------------------------------------------
# Feature normalisation
# ---------------------------------------------------------------------------

def _none_if_missing(value: object) -> str | None:
    """Map pandas missing values to ``None`` and everything else to ``str``."""
    if value is None or pd.isna(value):
        return None
    return str(value)


def _is_coordinate(values: pd.Series) -> pd.Series:
    """True where a text value is a plain integer literal that fits in int64."""
    matched: pd.Series = values.str.fullmatch(COORDINATE_PATTERN)
    return matched.fillna(False).astype(bool)


def normalize_features(raw: pd.DataFrame) -> list[Feature]:
    """Filter, clean and type the raw feature table.

    Only ``ORF`` and ``centromere`` rows are kept.  Missing gene names fall
    back to the ORF identifier, and each feature gets ``min``/``max``
    coordinates regardless of strand.

    Parameters
    ----------
    raw : pd.DataFrame
        Output of :func:`read_sgd_features` (or any table with
        ``REQUIRED_COLUMNS``).

    Returns
    -------
    list[Feature]
        Retained features, in input order.

    Raises
    ------
    MalformedFeatureError
        If a required column is absent, or a retained row lacks a
        ``gene_id`` or chromosome, has a coordinate that is not a plain
        integer of at most 18 digits, or is an ORF with neither
        ``gene_name`` nor ``orf_id``.  The message names the first
        offending row by its 1-based input line and ``gene_id``.
    """
    missing_cols: list[str] = [c for c in REQUIRED_COLUMNS if c not in raw.columns]
    if missing_cols:
        raise MalformedFeatureError(
            f"Feature table is missing required column(s): {', '.join(missing_cols)}"
        )

    # Remember each row's 1-based position in the input for error messages
    work: pd.DataFrame = raw.reset_index(drop=True)
    work = work.assign(line=np.arange(1, len(work) + 1))

    # Keep only ORFs and centromeres
    kept: pd.DataFrame = work[work["type"].isin(RETAINED_TYPES)]

    # Coordinates as stripped text; validated before any conversion
    start_text: pd.Series = kept["start"].astype("string").str.strip()
    stop_text: pd.Series = kept["stop"].astype("string").str.strip()

    # Each check pairs a row mask with the reason reported for it
    checks: list[tuple[pd.Series, str]] = [
        (kept["gene_id"].isna(), "missing gene_id"),
        (kept["chromosome"].isna(), "missing chromosome"),
        (~_is_coordinate(start_text), "start is not an integer coordinate"),
        (~_is_coordinate(stop_text), "stop is not an integer coordinate"),
        (
            (kept["type"] == ORF_TYPE)
            & kept["gene_name"].isna()
            & kept["orf_id"].isna(),
            "ORF has neither gene_name nor orf_id",
        ),
    ]

    bad: pd.Series = pd.Series(False, index=kept.index)
    for mask, _ in checks:
        bad |= mask

    if bad.any():
        offenders: pd.DataFrame = kept[bad]
        first = offenders.iloc[0]
        reasons: list[str] = [
            reason for mask, reason in checks if mask.loc[offenders.index[0]]
        ]
        raise MalformedFeatureError(
            f"Malformed feature at line {first['line']} "
            f"(gene_id={_none_if_missing(first['gene_id'])!r}, "
            f"chromosome={_none_if_missing(first['chromosome'])!r}, "
            f"start={_none_if_missing(first['start'])!r}, "
            f"stop={_none_if_missing(first['stop'])!r}): "
            f"{', '.join(reasons)}; "
            f"{len(offenders)} malformed row(s) in total"
        )

    start: np.ndarray = np.array([int(v) for v in start_text], dtype=np.int64)
    stop: np.ndarray = np.array([int(v) for v in stop_text], dtype=np.int64)

    # Strand decides which of start/stop is smaller; normalise to min/max
    lo: np.ndarray = np.minimum(start, stop)
    hi: np.ndarray = np.maximum(start, stop)

    # Unnamed features are labelled by their systematic ORF name
    gene_name: pd.Series = kept["gene_name"].fillna(kept["orf_id"])

    features: list[Feature] = [
        Feature(
            gene_id=str(gene_id),
            type=str(ftype),
            orf_id=_none_if_missing(orf_id),
            gene_name=_none_if_missing(name),
            chromosome=str(chrom),
            min=int(fmin),
            max=int(fmax),
        )
        for gene_id, ftype, orf_id, name, chrom, fmin, fmax in zip(
            kept["gene_id"], kept["type"], kept["orf_id"], gene_name,
            kept["chromosome"], lo, hi,
        )
    ]

    logger.info(
        "Retained %d of %d rows (types: %s)",
        len(features), len(raw), ", ".join(RETAINED_TYPES),
    )

    return features


# ---------------------------------------------------------------------------
# Arm classification
# ---------------------------------------------------------------------------

def centromere_bounds(
    features: Iterable[Feature],
) -> tuple[dict[str, CentromereBound], Counter]:
    """Collect centromere coordinates per chromosome.

    Returns
    -------
    bounds : dict[str, CentromereBound]
        Chromosomes with exactly one centromere feature.
    counts : Counter
        Number of centromere features seen on every chromosome.
    """
    counts: Counter = Counter()
    bounds: dict[str, CentromereBound] = {}

    for feature in features:
        if feature.type != CENTROMERE_TYPE:
            continue
        counts[feature.chromosome] += 1
        bounds[feature.chromosome] = CentromereBound(
            chromosome=feature.chromosome,
            cen_min=feature.min,
            cen_max=feature.max,
        )

    # Ambiguous chromosomes get no bound at all rather than an arbitrary one
    for chrom, n in counts.items():
        if n != 1:
            del bounds[chrom]

    return bounds, counts


def arm_for(feature: Feature, bound: CentromereBound) -> str:
    """Left if the feature ends before the centromere starts, else right."""
    return LEFT_ARM if feature.max < bound.cen_min else RIGHT_ARM


def classify_arms(
    features: Iterable[Feature],
    strict: bool = False,
) -> ArmClassification:
    """Assign every ORF to the left or right arm of its chromosome.

    A chromosome needs exactly one centromere feature.  When it has none or
    several, its ORFs are not classified: by default the chromosome is
    skipped and reported, with ``strict=True`` the whole run fails.

    Parameters
    ----------
    features : Iterable[Feature]
        Output of :func:`normalize_features`.
    strict : bool
        Raise instead of skipping chromosomes without a unique centromere.

    Returns
    -------
    ArmClassification
        Assignments in input order plus the skipped chromosomes.

    Raises
    ------
    CentromereError
        In strict mode, if any chromosome carrying ORFs lacks exactly one
        centromere.
    """
    features = list(features)
    bounds, counts = centromere_bounds(features)

    # ORFs grouped per chromosome, preserving input order
    orfs_by_chrom: defaultdict[str, list[Feature]] = defaultdict(list)
    for feature in features:
        if feature.type == ORF_TYPE:
            orfs_by_chrom[feature.chromosome].append(feature)

    # Chromosomes whose ORFs cannot be placed on an arm
    problems: dict[str, str] = {}
    for chrom in sorted(orfs_by_chrom, key=chrom_sort_key):
        if chrom in bounds:
            continue
        n: int = counts.get(chrom, 0)
        problems[chrom] = (
            "no centromere feature" if n == 0 else f"{n} centromere features"
        )

    if problems and strict:
        raise CentromereError(problems)

    for chrom, reason in problems.items():
        logger.warning(
            "Skipping chromosome %s (%d ORFs): %s",
            chrom, len(orfs_by_chrom[chrom]), reason,
        )

    result = ArmClassification(skipped=problems)
    for feature in features:
        bound: CentromereBound | None = bounds.get(feature.chromosome)
        if feature.type != ORF_TYPE or bound is None:
            continue
        result.assignments.append(ArmAssignment(feature, arm_for(feature, bound)))

    logger.info(
        "Assigned %d ORFs to chromosome arms; skipped %d chromosome(s)",
        len(result.assignments), len(problems),
    )

    return result


# ---------------------------------------------------------------------------
# Pairwise distances
# ---------------------------------------------------------------------------

def _sign(value: int) -> int:
    # -1, 0 or +1; zero is a class of its own
    return (value > 0) - (value < 0)


def feature_distance(a: Feature, b: Feature) -> int:
    """Gap in base pairs between two features; 0 if they overlap or abut.

    ``a.max - b.min`` and ``a.min - b.max`` share a sign only when one
    feature lies entirely to one side of the other.  Either term being zero
    already makes the minimum zero, so the treatment of ``sign(0)`` never
    changes the result.
    """
    end_to_start: int = a.max - b.min
    start_to_end: int = a.min - b.max

    if _sign(end_to_start) != _sign(start_to_end):
        return 0  # ranges overlap

    return min(abs(end_to_start), abs(start_to_end))


def group_by_arm(
    assignments: Iterable[ArmAssignment],
) -> dict[tuple[str, str], list[Feature]]:
    """Group ORFs by (chromosome, arm) in chromosome order, left before right."""
    groups: defaultdict[tuple[str, str], list[Feature]] = defaultdict(list)
    for assignment in assignments:
        groups[(assignment.feature.chromosome, assignment.arm)].append(
            assignment.feature
        )

    ordered_keys = sorted(
        groups, key=lambda key: (chrom_sort_key(key[0]), ARMS.index(key[1]))
    )
    return {key: groups[key] for key in ordered_keys}


def pair_distances(assignments: Iterable[ArmAssignment]) -> list[GenePair]:
    """Pair every ORF with every ORF on the same arm, itself included.

    Both orders of each pair are emitted, so a group of ``n`` ORFs yields
    ``n * n`` rows; ``(A, A)`` rows carry distance 0.
    """
    pairs: list[GenePair] = []

    for (chrom, arm), group in group_by_arm(assignments).items():
        for a in group:
            for b in group:
                pairs.append(
                    GenePair(
                        chromosome=chrom,
                        arm=arm,
                        gene_id_a=a.gene_id,
                        gene_id_b=b.gene_id,
                        orf_id_a=a.orf_id,
                        orf_id_b=b.orf_id,
                        gene_name_a=a.gene_name,
                        gene_name_b=b.gene_name,
                        distance=feature_distance(a, b),
                    )
                )

    logger.debug("Computed %d gene pairs", len(pairs))

    return pairs


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def pairs_to_frame(pairs: Iterable[GenePair]) -> pd.DataFrame:
    """Convert gene pairs into a DataFrame with ``OUTPUT_COLUMNS``."""
    return pd.DataFrame([asdict(p) for p in pairs], columns=OUTPUT_COLUMNS)


def write_partitions(
    pairs: Iterable[GenePair],
    persist: PersistTable,
) -> dict[str, int]:
    """Hand each (chromosome, arm) partition to ``persist``.

    Returns
    -------
    dict[str, int]
        Destination key -> number of rows, in the order written.
    """
    partitions: dict[str, list[GenePair]] = {}
    for pair in pairs:
        partitions.setdefault(partition_key(pair.chromosome, pair.arm), []).append(pair)

    written: dict[str, int] = {}
    for key, rows in partitions.items():
        persist(pairs_to_frame(rows), key)
        written[key] = len(rows)

    return written


def csv_writer(outdir: Path) -> PersistTable:
    """Return a persist collaborator writing ``<outdir>/<key>.csv``."""
    outdir = Path(outdir)

    def persist(frame: pd.DataFrame, key: str) -> None:
        outdir.mkdir(parents=True, exist_ok=True)
        path: Path = outdir / f"{key}.csv"
        frame.to_csv(path, index=False)
        logger.info("Wrote %s (%d rows)", path, len(frame))

    return persist


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

def update_genetic_distances(
    source: str | Path,
    persist: PersistTable,
    fetch: FetchTable = read_sgd_features,
    strict: bool = False,
) -> RunSummary:
    """Fetch the feature table and write one distance table per chromosome arm.

    All validation happens before the first partition is persisted, so a
    malformed table or (in strict mode) a missing centromere leaves the
    destination untouched.
    """
    features: list[Feature] = normalize_features(fetch(source))
    classification: ArmClassification = classify_arms(features, strict=strict)
    pairs: list[GenePair] = pair_distances(classification.assignments)

    return RunSummary(
        partitions=write_partitions(pairs, persist),
        skipped=classification.skipped,
    )


# ---------------------------------------------------------------------------
# Summary report
# ---------------------------------------------------------------------------

def print_summary(summary: RunSummary) -> None:
    """Print the partitions written and any skipped chromosomes to stdout."""
    print(f"Wrote {len(summary.partitions)} chromosome-arm table(s):")
    for key, rows in summary.partitions.items():
        print(f"  {key:12s}: {rows} pairs")

    if summary.skipped:
        print("\nChromosomes skipped (no unique centromere):")
        for chrom, reason in summary.skipped.items():
            print(f"  {chrom}: {reason}")


# ---------------------------------------------------------------------------
# CLI argument parsing
# ---------------------------------------------------------------------------

def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse and validate command-line arguments."""
    parser = argparse.ArgumentParser(
        description=(
            "Compute pairwise ORF distances per chromosome arm from the "
            "SGD chromosomal feature table."
        ),
    )

    # Where to read SGD_features.tab from
    parser.add_argument(
        "--from",
        dest="source",
        default=SGD_FEATURES_URL,
        help="URL or path of SGD_features.tab (default: current SGD release)",
    )

    # Output directory (created automatically if absent)
    parser.add_argument(
        "--outdir",
        type=Path,
        default=DEFAULT_OUTDIR,
        help="Directory for the per-arm CSVs (default: genetic_distances/)",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail instead of skipping chromosomes without exactly one centromere",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log DEBUG messages",
    )

    args: argparse.Namespace = parser.parse_args(argv)

    # A local source must exist; URLs are checked when downloaded
    if not args.source.startswith(("http://", "https://")) and not Path(args.source).exists():
        parser.error(f"Feature table not found: {args.source}")

    return args


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    """Run the pipeline: read, normalise, classify, pair, write, report."""

    # --- Set up logging to stderr at INFO level ---
    logging.basicConfig(
        level=logging.INFO,  # show INFO and above
        format="%(levelname)s: %(message)s",  # simple format without timestamp
        stream=sys.stderr,  # keep stdout clean for the summary
    )

    # --- Parse and validate CLI arguments ---
    args: argparse.Namespace = parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        summary: RunSummary = update_genetic_distances(
            args.source, csv_writer(args.outdir), strict=args.strict,
        )
    except (MalformedFeatureError, CentromereError) as exc:
        sys.exit(f"error: {exc}")
    except requests.RequestException as exc:
        sys.exit(f"error: could not download {args.source}: {exc}")

    print_summary(summary)
    print(f"\nWrote results to: {args.outdir.resolve()}")


# Standard Python idiom: only run main() when executed as a script
if __name__ == "__main__":
    main()
