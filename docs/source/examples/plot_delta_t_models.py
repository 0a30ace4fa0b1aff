"""
Delta T Models
==============

Compare several ΔT models across four centuries.

This example demonstrates how :func:`.evaluateDeltaT` works with the :class:`.DeltaTModel`
labels, along with a simple plot.
"""

# %%
# Imports
# -------

# Third Party Imports
import numpy as np
from matplotlib import pyplot as plt

# %%
# Create Epochs
# -------------
#
# Sample the first day of every year from 1620 to 2020.
# The Julian days are built with the permissive calendar conversion.

# stellartime Imports
from stellartime.physics.time.stardate import JulianDate

years = np.arange(1620, 2021)
epochs = [JulianDate.getJulianDate(int(year), 1, 1) for year in years]

# %%
# Evaluate Models
# ---------------
#
# Models only cover the span of years they were fit to, and evaluate to zero elsewhere.
# Those zeros are masked so they don't show up as drops in the plot.

# stellartime Imports
from stellartime.physics.time.deltat import DeltaTModel, evaluateDeltaT

models = (
    DeltaTModel.ESPENAK_MEEUS,
    DeltaTModel.MEEUS,
    DeltaTModel.MEEUS_SIMONS,
    DeltaTModel.MONTENBRUCK_PFLEGER,
    DeltaTModel.SCHMADEL_ZECH_1988,
)

delta_t = {}
for model in models:
    values = np.array([evaluateDeltaT(model, epoch) for epoch in epochs])
    delta_t[model] = np.ma.masked_equal(values, 0.0)

# %%
# Plot Data
# ---------
#
# Plot every model against the calendar year.

plt.figure(figsize=(10, 5))
for model, values in delta_t.items():
    plt.plot(years, values, label=model.value)
plt.title("ΔT = TT - UT")
plt.xlabel("Year")
plt.ylabel("ΔT (s)")
plt.grid(True, alpha=0.3)
plt.legend()
plt.show()
