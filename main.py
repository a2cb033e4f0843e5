#!/usr/bin/env python3
"""
HexFov - Entry Point
═══════════════════════════════════════════════════════════════════════════

Liczy pole widzenia dla scenariusza z data/scenarios.yaml albo dla
losowej mapy i wypisuje mapę tekstową.

Użycie:
    python main.py --scenario room             # Scenariusz z YAML
    python main.py --scenario room --corner    # Z regułą narożników
    python main.py --random --seed 12345       # Losowa mapa
    python main.py --random --range 5 -v       # Szczegółowy output
    python main.py --scenario pillars --json output/pillars.json

Wynik:
    - Wypisuje mapę widocznych pól na konsolę
    - Opcjonalnie zapisuje listę widocznych pól do pliku JSON
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Dodaj katalog projektu do path
sys.path.insert(0, str(Path(__file__).parent))

from hexfov.core.config_loader import ConfigLoader
from hexfov.core.hex_coord import Coordinate
from hexfov.core.rng import GameRNG
from hexfov.core.scenario import Scenario
from hexfov.fov.hex_fov import HexFov
from hexfov.memory.fov_memory import FovMemory


def build_random_scenario(args, loader: ConfigLoader) -> Scenario:
    """Losowa mapa z parametrami z CLI uzupełnionymi defaults."""
    scatter = loader.get_scatter_config()
    fov_defaults = loader.get_fov_defaults()

    width = args.width or scatter.get("width", 24)
    height = args.height or scatter.get("height", 24)
    density = args.density if args.density is not None else scatter.get("density", 0.15)

    rng = GameRNG(seed=args.seed)
    origin = Coordinate(width // 2, height // 2)
    return Scenario(
        id=f"random_{args.seed}",
        width=width,
        height=height,
        origin=origin,
        range=fov_defaults.get("range", 8),
        corner_extension=fov_defaults.get("corner_extension", False),
        walls=rng.scatter(width, height, density, keep_clear=[origin]),
    )


def main(argv=None):
    """Główna funkcja."""
    parser = argparse.ArgumentParser(
        description="HexFov - hex grid field of view",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--scenario",
        help="ID scenariusza z data/scenarios.yaml"
    )
    source.add_argument(
        "--random",
        action="store_true",
        help="Losowa mapa (patrz --seed, --density)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=12345,
        help="Ziarno losowości (domyślnie: 12345)"
    )
    parser.add_argument("--width", type=int, default=None, help="Szerokość losowej mapy")
    parser.add_argument("--height", type=int, default=None, help="Wysokość losowej mapy")
    parser.add_argument("--density", type=float, default=None, help="Gęstość ścian (0.0 - 1.0)")
    parser.add_argument(
        "--range",
        type=int,
        default=None,
        help="Promień widzenia (nadpisuje scenariusz)"
    )
    parser.add_argument(
        "--corner",
        action="store_true",
        help="Włącz widoczność narożników ścian"
    )
    parser.add_argument(
        "--data",
        default=str(Path(__file__).parent / "data"),
        help="Folder z plikami YAML"
    )
    parser.add_argument(
        "--json",
        default=None,
        help="Zapisz widoczne pola do pliku JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Szczegółowy output"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    loader = ConfigLoader(args.data)

    try:
        if args.random:
            scenario = build_random_scenario(args, loader)
        else:
            scenario = loader.load_scenario(args.scenario)
    except (KeyError, ValueError, FileNotFoundError) as e:
        print(f"Błąd: {e}", file=sys.stderr)
        return 1

    fov_range = args.range if args.range is not None else scenario.range
    corner = args.corner or scenario.corner_extension
    if fov_range < 0:
        print("Błąd: promień widzenia nie może być ujemny", file=sys.stderr)
        return 1

    print("=" * 60)
    print("HEX FOV")
    print("=" * 60)
    print(f"Scenariusz: {scenario.id} ({scenario.width}x{scenario.height})")
    print(f"Obserwator: {scenario.origin}, promień: {fov_range}, narożniki: {'tak' if corner else 'nie'}")
    print()

    # Kolejność traversalu - dla JSON
    fov = HexFov(lambda offset: scenario.is_opaque(scenario.origin + offset), fov_range)
    if corner:
        fov = fov.with_corner_extension()
    visible = [scenario.origin + offset for offset in fov]

    memory = FovMemory()
    memory.update(visible)

    print(memory.render(
        scenario.width,
        scenario.height,
        walls=scenario.walls,
        origin=scenario.origin,
        glyphs=loader.get_render_config(),
    ))
    print()

    in_map = [pos for pos in visible if scenario.in_bounds(pos)]
    print(f"Widoczne pola: {len(visible)} (na mapie: {len(in_map)})")

    if args.json:
        output_path = Path(args.json)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump({
                "scenario": scenario.id,
                "origin": list(scenario.origin.pair),
                "range": fov_range,
                "corner_extension": corner,
                "visible": [list(pos.pair) for pos in visible],
            }, f, indent=2)
        print(f"📄 Zapisano: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
