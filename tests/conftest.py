"""
Shared fixtures for the Iris chart tests.
"""

import matplotlib
matplotlib.use('Agg')

import pandas as pd
import pytest


PREFIXED_CSV = """PetalLength,PetalWidth,Species
1.4,0.2,Iris-setosa
1.3,0.2,Iris-setosa
1.5,0.3,Iris-setosa
1.0,0.1,Iris-setosa
4.7,1.4,Iris-versicolor
4.5,1.5,Iris-versicolor
4.0,1.3,Iris-versicolor
3.9,1.1,Iris-versicolor
6.0,2.5,Iris-virginica
5.1,1.9,Iris-virginica
5.9,2.1,Iris-virginica
6.9,2.3,Iris-virginica
"""

PLAIN_CSV = """sepalLength,sepalWidth,petalLength,petalWidth,species
5.1,3.5,1.4,0.2,setosa
4.9,3.0,1.4,0.2,setosa
7.0,3.2,4.7,1.4,versicolor
6.4,3.2,4.5,1.5,versicolor
6.3,3.3,6.0,2.5,virginica
5.8,2.7,5.1,1.9,virginica
"""


@pytest.fixture
def prefixed_csv(tmp_path):
    path = tmp_path / "iris.csv"
    path.write_text(PREFIXED_CSV, encoding='utf-8')
    return path


@pytest.fixture
def plain_csv(tmp_path):
    path = tmp_path / "iris_plain.csv"
    path.write_text(PLAIN_CSV, encoding='utf-8')
    return path


@pytest.fixture
def records():
    """Canonical records with three species of disjoint petal lengths."""
    return pd.DataFrame({
        'petal_length': [1.4, 1.3, 1.5, 1.0, 4.7, 4.5, 4.0, 3.9, 6.0, 5.1, 5.9, 6.9],
        'petal_width': [0.2, 0.2, 0.3, 0.1, 1.4, 1.5, 1.3, 1.1, 2.5, 1.9, 2.1, 2.3],
        'species': ['Iris-setosa'] * 4 + ['Iris-versicolor'] * 4 + ['Iris-virginica'] * 4,
    })
