"""Formal setup invariants.

This file documents what each stage MUST produce. Use it as a reviewer anchor
and system reference.
"""

PIPELINE_INVARIANTS = {
    "options": [
        "Each switch resolved from a TRUE/FALSE prefix",
        "erosion_period == surface_erosion",
        "init_sed_flag == surface_erosion at setup",
        "road_routing is False when no road network was loaded",
    ],

    "fine_grid": [
        "dmass > 0",
        "nx_fine = int(nx * (dy / dmass)), ny_fine likewise",
        "num_cells_fine == 0 at setup",
    ],

    "road_cells": [
        "Buffers exist iff road_routing AND inside basin AND road_area > 0",
        "Each allocated cell holds h, start_runoff, start_runon, old_sed_in, old_sed_out",
        "Every buffer has length cell_factor",
    ],

    "diameters": [
        "Length n_sed_sizes",
        "Finite, positive, non-decreasing",
        "Both channel and debris-flow populations represented",
    ],

    "schedule": [
        "Only parsed when surface_erosion is enabled",
        "Length equals TIME STEPS",
        "start < end for every period",
    ],
}

# Which stages are optional vs required
STAGE_REQUIREMENTS = {
    "options": "REQUIRED",
    "fine_grid": "REQUIRED",
    "road_cells": "OPTIONAL",  # Only if road_routing
    "diameters": "REQUIRED",
    "schedule": "OPTIONAL",    # Only if surface_erosion
}
