from __future__ import annotations

from typing import Dict, List, Optional

from fastapi import APIRouter
from pydantic import BaseModel

from ..errors import ToolError


router = APIRouter(prefix="/tools/periodic-table", tags=["periodic_table"])

PERIODS = 7
GROUPS = 18


ELEMENT_CATEGORIES: Dict[str, Dict[str, str]] = {
    "alkali-metal": {"name": "Alkali Metal", "color": "red"},
    "alkaline-earth": {"name": "Alkaline Earth Metal", "color": "yellow"},
    "transition-metal": {"name": "Transition Metal", "color": "blue"},
    "post-transition": {"name": "Post-Transition Metal", "color": "light-green"},
    "metalloid": {"name": "Metalloid", "color": "green"},
    "nonmetal": {"name": "Nonmetal", "color": "teal"},
    "halogen": {"name": "Halogen", "color": "purple"},
    "noble-gas": {"name": "Noble Gas", "color": "indigo"},
    "lanthanide": {"name": "Lanthanide", "color": "pink"},
    "actinide": {"name": "Actinide", "color": "orange"},
    "unknown": {"name": "Unknown Properties", "color": "gray"},
}


class Element(BaseModel):
    symbol: str
    name: str
    number: int
    mass: str
    category: str
    group: int
    period: int
    description: str


def _el(symbol, name, number, mass, category, group, period, description) -> Element:
    return Element(symbol=symbol, name=name, number=number, mass=mass, category=category,
                   group=group, period=period, description=description)


# Representative sample across the categories, not the full table
ELEMENTS: List[Element] = [
    _el("H", "Hydrogen", 1, "1.008", "nonmetal", 1, 1,
        "Colorless, odorless, tasteless, non-toxic, highly combustible gas. Most abundant chemical substance in the universe."),
    _el("He", "Helium", 2, "4.0026", "noble-gas", 18, 1,
        "Colorless, odorless, tasteless, non-toxic, inert monatomic gas. Second most abundant element in the observable universe."),
    _el("Li", "Lithium", 3, "6.94", "alkali-metal", 1, 2,
        "Soft, silvery-white alkali metal. Under standard conditions, it is the lightest metal and the lightest solid element."),
    _el("Be", "Beryllium", 4, "9.0122", "alkaline-earth", 2, 2,
        "Relatively rare element in the universe. Steel-gray, strong, lightweight and brittle alkaline earth metal."),
    _el("B", "Boron", 5, "10.81", "metalloid", 13, 2,
        "Produced entirely by cosmic ray spallation and supernovae. Essential for all plants and some animals."),
    _el("C", "Carbon", 6, "12.011", "nonmetal", 14, 2,
        "Basis of all known life on Earth. Fourth most abundant element in the universe by mass."),
    _el("N", "Nitrogen", 7, "14.007", "nonmetal", 15, 2,
        "Colorless, odorless, tasteless gas that makes up 78% of Earth's atmosphere. Essential component of proteins and nucleic acids."),
    _el("O", "Oxygen", 8, "15.999", "nonmetal", 16, 2,
        "Third most abundant element in the universe. Highly reactive nonmetal that readily forms compounds with most elements."),
    _el("F", "Fluorine", 9, "18.998", "halogen", 17, 2,
        "Lightest halogen. Extremely reactive gas that readily forms compounds with most elements."),
    _el("Ne", "Neon", 10, "20.180", "noble-gas", 18, 2,
        "Colorless, odorless, inert monatomic gas. Fifth most abundant element in the universe."),
    _el("Na", "Sodium", 11, "22.990", "alkali-metal", 1, 3,
        "Soft, silvery-white, highly reactive metal. Sixth most abundant element in the Earth's crust."),
    _el("Mg", "Magnesium", 12, "24.305", "alkaline-earth", 2, 3,
        "Shiny gray solid closely resembling the other elements in the second column of the periodic table."),
    _el("Al", "Aluminum", 13, "26.982", "post-transition", 13, 3,
        "Silvery-white, soft, non-magnetic and ductile metal. Third most abundant element in the Earth's crust."),
    _el("Si", "Silicon", 14, "28.085", "metalloid", 14, 3,
        "Hard and brittle crystalline solid with a blue-grey metallic lustre. Second most abundant element in the Earth's crust."),
    _el("P", "Phosphorus", 15, "30.974", "nonmetal", 15, 3,
        "Essential for life. Forms the backbone of DNA and RNA molecules. Used in fertilizers, detergents, and pesticides."),
    _el("S", "Sulfur", 16, "32.06", "nonmetal", 16, 3,
        "Abundant, multivalent, and nonmetallic. Essential element for all living organisms."),
    _el("Cl", "Chlorine", 17, "35.45", "halogen", 17, 3,
        "Yellow-green gas at room temperature. Strong oxidizing agent used in water purification and as a disinfectant."),
    _el("Ar", "Argon", 18, "39.948", "noble-gas", 18, 3,
        "Colorless, odorless, inert monatomic gas. Third most abundant gas in the Earth's atmosphere."),
    _el("K", "Potassium", 19, "39.098", "alkali-metal", 1, 4,
        "Silvery-white, soft alkali metal that oxidizes rapidly in air. Essential for the function of all living cells."),
    _el("Ca", "Calcium", 20, "40.078", "alkaline-earth", 2, 4,
        "Soft, silvery-white alkaline earth metal. Fifth most abundant element in Earth's crust."),
    _el("Fe", "Iron", 26, "55.845", "transition-metal", 8, 4,
        "Most common element on Earth by mass. Pure iron is soft; it forms much stronger alloys such as steel."),
    _el("Cu", "Copper", 29, "63.546", "transition-metal", 11, 4,
        "Soft, malleable, and ductile metal with high thermal and electrical conductivity."),
    _el("Zn", "Zinc", 30, "65.38", "transition-metal", 12, 4,
        "Bluish-white, lustrous, diamagnetic metal. The fourth most common metal in use after iron, aluminum, and copper."),
    _el("Br", "Bromine", 35, "79.904", "halogen", 17, 4,
        "Only non-metallic element that is liquid at room temperature. Reddish-brown with an irritating odor."),
    _el("Ag", "Silver", 47, "107.87", "transition-metal", 11, 5,
        "Soft, white, lustrous transition metal with the highest electrical conductivity of any element."),
    _el("Au", "Gold", 79, "196.97", "transition-metal", 11, 6,
        "Bright, slightly reddish yellow, dense, soft, malleable, and ductile metal. Resistant to most chemicals."),
    _el("Hg", "Mercury", 80, "200.59", "transition-metal", 12, 6,
        "Only metallic element that is liquid at standard conditions. Formerly used in thermometers and barometers."),
    _el("Pb", "Lead", 82, "207.2", "post-transition", 14, 6,
        "Heavy, soft, malleable metal with a relatively low melting point. Toxic to humans and animals."),
    _el("U", "Uranium", 92, "238.03", "actinide", 3, 7,
        "Silvery-grey, weakly radioactive metal. Used as fuel in nuclear power plants."),
]

_BY_SYMBOL: Dict[str, Element] = {e.symbol.lower(): e for e in ELEMENTS}


def build_grid() -> List[List[Optional[Element]]]:
    grid: List[List[Optional[Element]]] = [[None] * GROUPS for _ in range(PERIODS)]
    for element in ELEMENTS:
        grid[element.period - 1][element.group - 1] = element
    return grid


def find_element(symbol: str) -> Element:
    element = _BY_SYMBOL.get(symbol.strip().lower())
    if element is None:
        raise ToolError(404, f"Element not found: {symbol}")
    return element


@router.get("")
def list_elements(category: Optional[str] = None):
    if category is not None and category not in ELEMENT_CATEGORIES:
        raise ToolError(400, f"Unknown category: {category}")
    elements = [e for e in ELEMENTS if category is None or e.category == category]
    return {"categories": ELEMENT_CATEGORIES, "elements": elements}


@router.get("/grid")
def grid():
    return {"periods": PERIODS, "groups": GROUPS, "grid": build_grid()}


@router.get("/{symbol}", response_model=Element)
def element_detail(symbol: str):
    return find_element(symbol)
