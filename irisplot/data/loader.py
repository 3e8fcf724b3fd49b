"""
Dataset loader for Iris CSV files.
"""

import pandas as pd
import numpy as np
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from irisplot.data.validator import (
    DataValidator,
    REQUIRED_COLUMNS,
    NUMERIC_COLUMNS,
    PREFIXED_SPECIES,
    PLAIN_SPECIES,
)
from irisplot.utils.errors import DataFormatError
from irisplot.utils.helpers import ensure_list, normalize_name
from irisplot.utils.logger import LoggerMixin


def detect_label_style(labels: Iterable[str]) -> str:
    """
    Detect how species are labelled.

    Parameters
    ----------
    labels : iterable of str
        Species labels found in the data

    Returns
    -------
    str
        ``'prefixed'`` for ``Iris-setosa`` style labels, ``'plain'`` otherwise
    """
    labels = [str(label) for label in labels]
    if labels and all(label.startswith('Iris-') for label in labels):
        return 'prefixed'
    return 'plain'


def species_domain(labels: Iterable[str], configured: Optional[List[str]] = None) -> List[str]:
    """
    Ordered species domain for a set of labels.

    The configured list wins when given; otherwise the fixed three-species
    order matching the label style is used.
    """
    if configured:
        return ensure_list(configured)
    if detect_label_style(labels) == 'prefixed':
        return list(PREFIXED_SPECIES)
    return list(PLAIN_SPECIES)


class IrisLoader(LoggerMixin):
    """
    Load Iris records and normalise them to canonical columns.

    Both header variants of the dataset (``PetalLength``/``Species`` and
    ``petalLength``/``species``) are accepted and renamed to
    ``petal_length``, ``petal_width`` and ``species``.
    """

    def __init__(
        self,
        data_path: Optional[Union[str, Path]] = None,
        data: Optional[pd.DataFrame] = None,
        config: Optional[Dict] = None
    ):
        """
        Initialize loader.

        Parameters
        ----------
        data_path : str or Path, optional
            Path to a CSV file with a header row
        data : pd.DataFrame, optional
            Raw records already in memory
        config : dict, optional
            Configuration dictionary
        """
        if data_path is not None:
            self.data_path = Path(data_path)
            self.raw = None
        elif data is not None:
            self.data_path = None
            self.raw = data.copy()
        else:
            raise ValueError("Either data_path or data must be provided")

        self.config = config or {}
        data_config = self.config.get('data', {}) or {}
        self.column_overrides = data_config.get('columns', {}) or {}
        self.configured_species = data_config.get('species')

        self.validator = DataValidator(self.config)

    @property
    def name(self) -> str:
        return self.data_path.stem if self.data_path is not None else 'iris'

    def read_raw(self) -> pd.DataFrame:
        """
        Read the source as text, one column per header field.

        Returns
        -------
        pd.DataFrame
            Raw records

        Raises
        ------
        DataFormatError
            If the file is empty or its rows do not match the header
        """
        if self.raw is not None:
            return self.raw.copy()

        if not self.data_path.exists():
            raise FileNotFoundError(f"Data file not found: {self.data_path}")

        try:
            raw = pd.read_csv(self.data_path, dtype=str, skipinitialspace=True)
        except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
            raise DataFormatError(f"{self.data_path}: Cannot parse CSV ({e})") from e

        self.logger.info(f"Loaded {len(raw)} rows from {self.data_path}")
        return raw

    def resolve_columns(self, columns: Iterable[str]) -> Dict[str, str]:
        """
        Map canonical column names to source headers.

        Parameters
        ----------
        columns : iterable of str
            Source headers

        Returns
        -------
        dict
            ``{canonical_name: source_header}``
        """
        columns = list(columns)
        by_key = {}
        for col in columns:
            by_key.setdefault(normalize_name(col), col)

        resolved = {}
        missing = []
        for canonical in REQUIRED_COLUMNS:
            override = self.column_overrides.get(canonical)
            if override is not None:
                if override not in columns:
                    raise DataFormatError(
                        f"Configured column '{override}' for '{canonical}' not in header",
                        column=override
                    )
                resolved[canonical] = override
                continue

            source = by_key.get(normalize_name(canonical))
            if source is None:
                missing.append(canonical)
            else:
                resolved[canonical] = source

        if missing:
            raise DataFormatError(
                f"Missing required columns {missing} (found: {columns})"
            )

        return resolved

    def load(self) -> pd.DataFrame:
        """
        Load, coerce and validate the records.

        Returns
        -------
        pd.DataFrame
            Records with columns ``petal_length``, ``petal_width``, ``species``

        Raises
        ------
        DataFormatError
            If a column is missing, a measurement does not parse as a finite
            number, a species label is missing, or the dataset is empty.
        """
        raw = self.read_raw()
        mapping = self.resolve_columns(raw.columns)

        if raw.empty:
            raise DataFormatError(f"{self.name}: Dataset contains no records")

        records = pd.DataFrame(index=range(len(raw)))
        for canonical in NUMERIC_COLUMNS:
            records[canonical] = self._coerce_numeric(raw[mapping[canonical]], mapping[canonical])
        records['species'] = self._coerce_labels(raw[mapping['species']], mapping['species'])

        is_valid, errors = self.validator.validate_data(records, self.name)
        if not is_valid:
            raise DataFormatError("; ".join(errors))

        self.logger.info(
            f"Prepared {len(records)} records across "
            f"{records['species'].nunique()} species"
        )
        return records

    def species_domain(self, data: pd.DataFrame) -> List[str]:
        """Ordered species domain for loaded records."""
        return species_domain(data['species'].unique(), self.configured_species)

    @staticmethod
    def _coerce_numeric(column: pd.Series, source: str) -> pd.Series:
        if pd.api.types.is_numeric_dtype(column):
            text = column
        else:
            text = column.astype(str).str.strip()
        values = pd.to_numeric(text, errors='coerce').astype(float)

        bad = ~np.isfinite(values.to_numpy())
        if bad.any():
            pos = int(np.flatnonzero(bad)[0])
            raise DataFormatError(
                f"Row {pos + 1}: column '{source}' has non-numeric value "
                f"{column.iloc[pos]!r}",
                row=pos + 1,
                column=source
            )
        return values.reset_index(drop=True)

    @staticmethod
    def _coerce_labels(column: pd.Series, source: str) -> pd.Series:
        labels = column.reset_index(drop=True)
        missing = labels.isna() | (labels.astype(str).str.strip() == '')
        if missing.any():
            pos = int(np.flatnonzero(missing.to_numpy())[0])
            raise DataFormatError(
                f"Row {pos + 1}: column '{source}' has no species label",
                row=pos + 1,
                column=source
            )
        return labels.astype(str).str.strip()
