"""
Data validation utilities for loaded Iris records.
"""

import pandas as pd
import numpy as np
from typing import Dict, List, Optional, Tuple

from irisplot.utils.helpers import ensure_list
from irisplot.utils.logger import LoggerMixin

REQUIRED_COLUMNS = ['petal_length', 'petal_width', 'species']
NUMERIC_COLUMNS = ['petal_length', 'petal_width']

PREFIXED_SPECIES = ['Iris-setosa', 'Iris-versicolor', 'Iris-virginica']
PLAIN_SPECIES = ['setosa', 'versicolor', 'virginica']


class DataValidator(LoggerMixin):
    """
    Validate canonical Iris records (``petal_length``, ``petal_width``, ``species``).
    """

    def __init__(self, config: Optional[Dict] = None):
        """
        Initialize data validator.

        Parameters
        ----------
        config : dict, optional
            Configuration dictionary (uses the ``validation`` and ``data`` sections)
        """
        self.config = config or {}
        self.validation_config = self.config.get('validation', {}) or {}
        data_config = self.config.get('data', {}) or {}

        configured = data_config.get('species')
        if configured:
            self.known_species = ensure_list(configured)
        else:
            self.known_species = PREFIXED_SPECIES + PLAIN_SPECIES

    def validate_data(
        self,
        data: pd.DataFrame,
        name: str = 'iris'
    ) -> Tuple[bool, List[str]]:
        """
        Check required columns, numeric types, missing values and labels.

        Parameters
        ----------
        data : pd.DataFrame
            Records to validate
        name : str
            Dataset name used in messages

        Returns
        -------
        tuple
            (is_valid, error_messages)
        """
        errors = []

        missing_columns = [col for col in REQUIRED_COLUMNS if col not in data.columns]
        if missing_columns:
            errors.append(f"{name}: Missing required columns: {missing_columns}")
            return False, errors

        if data.empty:
            errors.append(f"{name}: Dataset contains no records")
            return False, errors

        for col in NUMERIC_COLUMNS:
            if not pd.api.types.is_numeric_dtype(data[col]):
                errors.append(f"{name}: Column '{col}' is not numeric")

        if not errors:
            for col in REQUIRED_COLUMNS:
                n_missing = int(data[col].isnull().sum())
                if n_missing:
                    errors.append(f"{name}: Column '{col}' has {n_missing} missing values")

        if not errors:
            values = data[NUMERIC_COLUMNS].to_numpy(dtype=float)
            if not np.isfinite(values).all():
                errors.append(f"{name}: Non-finite measurements found")
            elif not self.validation_config.get('allow_negative', False) and (values < 0).any():
                errors.append(f"{name}: Negative measurements found")

        labels = data['species'].dropna().astype(str).unique()
        prefixed = [label for label in labels if label.startswith('Iris-')]
        if prefixed and len(prefixed) < len(labels):
            plain = [label for label in labels if not label.startswith('Iris-')]
            errors.append(
                f"{name}: Mixed species label styles: {sorted(prefixed)} and {sorted(plain)}"
            )

        if self.validation_config.get('require_known_species', True):
            unknown = sorted(set(data['species'].dropna()) - set(self.known_species))
            if unknown:
                errors.append(f"{name}: Unknown species labels: {unknown}")

        if errors:
            for message in errors:
                self.logger.warning(message)

        return len(errors) == 0, errors

    def generate_validation_report(
        self,
        data: pd.DataFrame,
        name: str = 'iris'
    ) -> Dict:
        """
        Generate a validation report.

        Parameters
        ----------
        data : pd.DataFrame
            Records to validate
        name : str
            Dataset name

        Returns
        -------
        dict
            Validation report
        """
        report = {
            'name': name,
            'records': len(data),
            'species_counts': {},
            'missing_values': {},
            'ranges': {},
            'is_valid': False,
            'errors': []
        }

        if 'species' in data.columns:
            report['species_counts'] = {
                str(label): int(count)
                for label, count in data['species'].value_counts(sort=False).items()
            }

        for col in data.columns:
            missing = int(data[col].isnull().sum())
            if missing > 0:
                report['missing_values'][col] = missing

        for col in NUMERIC_COLUMNS:
            if col in data.columns and pd.api.types.is_numeric_dtype(data[col]) and not data.empty:
                report['ranges'][col] = (float(data[col].min()), float(data[col].max()))

        is_valid, errors = self.validate_data(data, name)
        report['is_valid'] = is_valid
        report['errors'] = errors

        return report
