from assistant.tools.plates import find_license_plate
from assistant.tools.rdw_lookup import build_enrichment_turn, fetch_rdw_data

__all__ = ["build_enrichment_turn", "fetch_rdw_data", "find_license_plate"]
