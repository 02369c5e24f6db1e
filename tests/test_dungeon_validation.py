import pytest

from cavern.dungeon import DungeonBuilder, DungeonConfig
from cavern.dungeon.errors import (
    DungeonConfigError,
    InsufficientCellsError,
    InvalidCoordinateError,
    InvalidDimensionError,
    InvalidInterConnectivityError,
    InvalidPercentageError,
)
from cavern.dungeon.pipeline import FAILED


@pytest.mark.parametrize(
    "fields,error,code",
    [
        (dict(rows=0, cols=12), InvalidDimensionError, "invalid_dimension"),
        (dict(rows=12, cols=-1), InvalidDimensionError, "invalid_dimension"),
        (dict(rows=3, cols=4, start=(3, 0)), InvalidCoordinateError, "invalid_coordinate"),
        (dict(rows=3, cols=4, end=(0, 4)), InvalidCoordinateError, "invalid_coordinate"),
        (dict(rows=3, cols=4, start=(-1, 0)), InvalidCoordinateError, "invalid_coordinate"),
        (dict(rows=3, cols=4, start=(1,)), InvalidCoordinateError, "invalid_coordinate"),
        (dict(rows=3, cols=4, treasure_percentage=101), InvalidPercentageError, "invalid_percentage"),
        (dict(rows=3, cols=4, treasure_percentage=-5), InvalidPercentageError, "invalid_percentage"),
        (dict(rows=3, cols=3), InsufficientCellsError, "insufficient_cells"),
        (dict(rows=1, cols=9), InsufficientCellsError, "insufficient_cells"),
        (dict(rows=3, cols=4, interconnectivity=-1), InvalidInterConnectivityError, "invalid_interconnectivity"),
        (dict(rows=3, cols=4, max_start_end_attempts=0), DungeonConfigError, "invalid_config"),
    ],
)
def test_invalid_configuration(fields, error, code):
    builder = DungeonBuilder(DungeonConfig(seed=3, **fields))
    with pytest.raises(error) as exc:
        builder.build()
    assert exc.value.code == code
    assert isinstance(exc.value, ValueError)
    assert builder.phase == FAILED


def test_dimension_checked_before_cell_count():
    with pytest.raises(InvalidDimensionError):
        DungeonBuilder(DungeonConfig(rows=0, cols=0)).build()


def test_ten_cells_is_enough():
    d = DungeonBuilder(DungeonConfig(rows=2, cols=5, seed=8)).build()
    assert d.get_total_nodes() == 10
    assert len(d.get_edges()) == 9
