"""Application-wide constants.

This module centralizes the pagination size, the value pools used to
generate random people and the fixed response messages.
"""

# Pagination
PAGE_SIZE = 50
DEFAULT_PAGE = 1

# Largest integer the store accepts for SKIP/LIMIT (64-bit signed)
MAX_STORE_INTEGER = 2**63 - 1

# Random person generation
MAX_PERSON_ID = 10000  # exclusive
MIN_PERSON_AGE = 18
PERSON_AGE_SPAN = 80  # ages are MIN_PERSON_AGE + [0, PERSON_AGE_SPAN)

PERSON_NAMES = (
    "Camilo",
    "Laura",
    "Andrés",
    "María",
    "Sofía",
    "Carlos",
    "Valentina",
    "Daniel",
)

CITY_NAMES = (
    "Bogotá",
    "Medellín",
    "Cali",
    "Barranquilla",
    "Cartagena",
)

# Graph schema
PERSON_LABEL = "Person"
CITY_LABEL = "City"
LIVES_IN = "LIVES_IN"
CITY_NAME_CONSTRAINT = "city_name_unique"

# Response messages
ROOT_MESSAGE = "API running with Neo4j"
PERSON_CREATED_MESSAGE = "Person created successfully"
INTERNAL_ERROR_MESSAGE = "Internal server error"
FORCED_BAD_REQUEST_MESSAGE = "Invalid request (forced)"
FORCED_NOT_FOUND_MESSAGE = "Resource not found (forced)"
FORCED_BAD_GATEWAY_MESSAGE = "Simulated 502 from the backend"
