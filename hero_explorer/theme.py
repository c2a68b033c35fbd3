# theme.py
from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class Theme:
    """配色方案"""

    background: str
    surface: str
    card: str
    card_notable: str
    text: str
    text_muted: str
    text_strong: str
    primary: str
    primary_dark: str
    gold: str
    gold_dark: str
    track: str
    high_row: str
    error_background: str
    error_text: str
    stat_colors: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Locale:
    """界面文字"""

    title: str
    placeholder: str
    search_button: str
    searching: str
    empty_state: str
    found_count: str
    notable_badge: str
    detail_section: str
    detail_id: str
    close_button: str
    avatar_alt: str
    stat_labels: Dict[str, str] = field(default_factory=dict)


STAT_COLORS = {
    "intelligence": "#4CAF50",
    "strength": "#F44336",
    "speed": "#FFEB3B",
    "durability": "#9C27B0",
    "power": "#2196F3",
    "combat": "#FF9800",
}

THEMES = {
    "dark": Theme(
        background="#121212",
        surface="#1E1E1E",
        card="#1E1E1E",
        card_notable="#252525",
        text="#E0E0E0",
        text_muted="#BDBDBD",
        text_strong="#FFFFFF",
        primary="#64B5F6",
        primary_dark="#1976D2",
        gold="#FFD700",
        gold_dark="#FFA500",
        track="#333333",
        high_row="#2A2A2A",
        error_background="#FFEBEE",
        error_text="#B71C1C",
        stat_colors=STAT_COLORS,
    ),
    "light": Theme(
        background="#F5F5F5",
        surface="#FFFFFF",
        card="#FFFFFF",
        card_notable="#FFF8E1",
        text="#212121",
        text_muted="#616161",
        text_strong="#000000",
        primary="#1976D2",
        primary_dark="#0D47A1",
        gold="#C79100",
        gold_dark="#FFA500",
        track="#E0E0E0",
        high_row="#EEEEEE",
        error_background="#FFEBEE",
        error_text="#B71C1C",
        stat_colors=STAT_COLORS,
    ),
}

LOCALES = {
    "en": Locale(
        title="Superhero Explorer",
        placeholder="Search heroes...",
        search_button="Search",
        searching="Searching heroes...",
        empty_state="No heroes found. Try a different search term.",
        found_count="Found {count} heroes",
        notable_badge="⭐ Featured Hero",
        detail_section="Power Stats",
        detail_id="Hero ID: {id}",
        close_button="Close",
        avatar_alt="Image of {name}",
        stat_labels={
            "intelligence": "Intelligence",
            "strength": "Strength",
            "speed": "Speed",
            "durability": "Durability",
            "power": "Power",
            "combat": "Combat",
        },
    ),
    "es": Locale(
        title="Explorador de Superhéroes",
        placeholder="Buscar héroes...",
        search_button="Buscar",
        searching="Buscando héroes...",
        empty_state="No se encontraron héroes. Prueba con otro nombre.",
        found_count="{count} héroes encontrados",
        notable_badge="⭐ Héroe Destacado",
        detail_section="Estadísticas de Poder",
        detail_id="ID del Héroe: {id}",
        close_button="Cerrar",
        avatar_alt="Imagen de {name}",
        stat_labels={
            "intelligence": "Inteligencia",
            "strength": "Fuerza",
            "speed": "Velocidad",
            "durability": "Resistencia",
            "power": "Poder",
            "combat": "Combate",
        },
    ),
}


def get_theme(name: str) -> Theme:
    try:
        return THEMES[name]
    except KeyError:
        raise ValueError(f"Unknown theme: {name}") from None


def get_locale(name: str) -> Locale:
    try:
        return LOCALES[name]
    except KeyError:
        raise ValueError(f"Unknown locale: {name}") from None
