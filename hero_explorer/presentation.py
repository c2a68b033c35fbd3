# presentation.py
"""
Pure Hero -> view-data functions. The widgets only lay out what these return,
so every styling decision (notable card, high stat bar) is made here.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from hero_explorer.models import Hero, is_high_stat, parse_stat, stat_fraction
from hero_explorer.theme import Locale, Theme

# 卡片默认只显示前三项
CARD_STATS = ("intelligence", "strength", "speed")


@dataclass(frozen=True)
class StatBar:
    name: str
    label: str
    raw: str
    value: int
    fraction: float
    high: bool
    color: str


@dataclass(frozen=True)
class CardSummary:
    hero: Hero
    name: str
    avatar_url: str
    avatar_alt: str
    bars: Tuple[StatBar, ...]
    total_power: int
    notable: bool
    accent_color: str
    ring_colors: Tuple[str, str]
    background: str
    elevation: int
    badge: Optional[str]


@dataclass(frozen=True)
class DetailSummary:
    hero: Hero
    name: str
    avatar_url: str
    avatar_alt: str
    section_title: str
    bars: Tuple[StatBar, ...]
    id_text: str
    close_text: str
    accent_color: str
    ring_colors: Tuple[str, str]


def stat_bar(name: str, raw: str, theme: Theme, locale: Locale) -> StatBar:
    return StatBar(
        name=name,
        label=locale.stat_labels.get(name, name.capitalize()),
        raw=raw,
        value=parse_stat(raw),
        fraction=stat_fraction(raw),
        high=is_high_stat(raw),
        color=theme.stat_colors.get(name, theme.primary),
    )


def card_summary(hero: Hero, theme: Theme, locale: Locale, full_stats: bool = False) -> CardSummary:
    notable = hero.is_notable
    bars = tuple(
        stat_bar(name, raw, theme, locale)
        for name, raw in hero.powerstats.items()
        if full_stats or name in CARD_STATS
    )
    return CardSummary(
        hero=hero,
        name=hero.name,
        avatar_url=hero.image.url,
        avatar_alt=locale.avatar_alt.format(name=hero.name),
        bars=bars,
        total_power=hero.total_power,
        notable=notable,
        accent_color=theme.gold if notable else theme.primary,
        ring_colors=(theme.gold, theme.gold_dark) if notable else (theme.primary, theme.primary_dark),
        background=theme.card_notable if notable else theme.card,
        elevation=8 if notable else 4,
        badge=locale.notable_badge if notable else None,
    )


def detail_summary(hero: Hero, theme: Theme, locale: Locale) -> DetailSummary:
    return DetailSummary(
        hero=hero,
        name=hero.name,
        avatar_url=hero.image.url,
        avatar_alt=locale.avatar_alt.format(name=hero.name),
        section_title=locale.detail_section,
        bars=tuple(stat_bar(name, raw, theme, locale) for name, raw in hero.powerstats.items()),
        id_text=locale.detail_id.format(id=hero.id),
        close_text=locale.close_button,
        accent_color=theme.primary,
        ring_colors=(theme.primary, theme.primary_dark),
    )
