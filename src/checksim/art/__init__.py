"""Deterministic composite engine for Checks artwork."""
from .check import Check, StoredState
from .tables import COLOR_BANDS, DIVISORS, EIGHTY_COLORS, GRADIENTS
from .genes import color_band_index, gradient_index
from .composite import L2_VIRTUAL_ID, VirtualMap, build_l2_render_map, compose_l2, composite_genes, simulate_composite
from .colors import color_indexes
from .render import generate_svg, save_svg
from .attributes import Attribute, attribute_value, map_check_attributes
from .metadata import ParsedTokenURI, build_token_uri, parse_token_uri

__all__ = [
    "Check",
    "StoredState",
    "COLOR_BANDS",
    "DIVISORS",
    "EIGHTY_COLORS",
    "GRADIENTS",
    "color_band_index",
    "gradient_index",
    "L2_VIRTUAL_ID",
    "VirtualMap",
    "build_l2_render_map",
    "compose_l2",
    "composite_genes",
    "simulate_composite",
    "color_indexes",
    "generate_svg",
    "save_svg",
    "Attribute",
    "attribute_value",
    "map_check_attributes",
    "ParsedTokenURI",
    "build_token_uri",
    "parse_token_uri",
]
