"""Input keywords and the follow sets that end implicit tables."""

from __future__ import annotations

LANDIS_DATA = "LandisData"
TIMESTEP = "Timestep"
MANAGEMENT_AREAS = "ManagementAreas"
STANDS = "Stands"
PRESCRIPTION = "Prescription"
STAND_RANKING = "StandRanking"
MINIMUM_AGE = "MinimumAge"
MAXIMUM_AGE = "MaximumAge"
STAND_ADJACENCY = "StandAdjacency"
ADJACENCY_TYPE = "AdjacencyType"
ADJACENCY_NEIGHBOR_SET_ASIDE = "AdjacencyNeighborSetAside"
SPATIAL_ARRANGEMENT = "SpatialArrangement"
MINIMUM_TIME_SINCE_LAST_HARVEST = "MinimumTimeSinceLastHarvest"
FOREST_TYPE_TABLE = "ForestTypeTable"
SITE_SELECTION = "SiteSelection"
MIN_TIME_SINCE_DAMAGE = "MinTimeSinceDamage"
PREVENT_ESTABLISHMENT = "PreventEstablishment"
COHORTS_REMOVED = "CohortsRemoved"
PLANT = "Plant"
SINGLE_REPEAT = "SingleRepeat"
MULTIPLE_REPEAT = "MultipleRepeat"
HARVEST_IMPLEMENTATIONS = "HarvestImplementations"
PRESCRIPTION_MAPS = "PrescriptionMaps"
EVENT_LOG = "EventLog"
SUMMARY_LOG = "SummaryLog"

# Lines that may legally follow a ranking method's table.
RANKING_FOLLOW = frozenset(
    {
        SITE_SELECTION,
        MINIMUM_AGE,
        MAXIMUM_AGE,
        FOREST_TYPE_TABLE,
        STAND_ADJACENCY,
        SPATIAL_ARRANGEMENT,
        MINIMUM_TIME_SINCE_LAST_HARVEST,
        MIN_TIME_SINCE_DAMAGE,
    }
)

FOREST_TYPE_FOLLOW = frozenset({SITE_SELECTION, COHORTS_REMOVED})

COHORT_FOLLOW = frozenset(
    {PLANT, SINGLE_REPEAT, MULTIPLE_REPEAT, PRESCRIPTION, HARVEST_IMPLEMENTATIONS}
)

# Inside a SingleRepeat block another repeat keyword cannot appear.
SINGLE_REPEAT_COHORT_FOLLOW = frozenset({PLANT, PRESCRIPTION, HARVEST_IMPLEMENTATIONS})

IMPLEMENTATIONS_FOLLOW = frozenset({PRESCRIPTION_MAPS, EVENT_LOG, SUMMARY_LOG})
