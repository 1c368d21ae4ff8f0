"""CIE 1931 colour-matching functions from the colour-science tables."""

import numpy as np
from colour import MSDS_CMFS

from ..errors import DatasetError
from ..models.tabulated import CIEDataset

CIE_1931_OBSERVER = "CIE 1931 2 Degree Standard Observer"
CIE_SAMPLE_COUNT = 471


def load_cie_1931() -> CIEDataset:
    """Load the CIE 1931 2° standard observer, 360-830 nm at 1 nm.

    Returns:
        CIEDataset with 471 rows

    Raises:
        DatasetError: If the table shipped by colour-science has another size
    """
    cmfs = MSDS_CMFS[CIE_1931_OBSERVER]

    wavelengths = np.asarray(cmfs.wavelengths, dtype=np.float64)
    values = np.asarray(cmfs.values, dtype=np.float64)

    if len(wavelengths) != CIE_SAMPLE_COUNT:
        raise DatasetError(
            f"{CIE_1931_OBSERVER} has {len(wavelengths)} rows, "
            f"expected {CIE_SAMPLE_COUNT}"
        )

    return CIEDataset(
        wavelengths=wavelengths,
        x_bar=values[:, 0],
        y_bar=values[:, 1],
        z_bar=values[:, 2],
        name=CIE_1931_OBSERVER,
    )
