#!/usr/bin/env python3
"""CLI utility for opening ranges, hand tiers, range adjustments and drills."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from rangelab.constants import CARD_RANKS, POSITIONS
from rangelab.gto_charts import chart_positions
from rangelab.practice import generate_practice_scenario
from rangelab.range_adjust import ACTION_MULTIPLIERS
from rangelab.service import RangeService


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Range toolkit CLI")
    parser.add_argument("--json", "-j", action="store_true", help="Output in JSON format")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    sub = parser.add_subparsers(dest="command", required=True)

    rng = sub.add_parser("range", help="Show the opening range for a position")
    rng.add_argument("position", choices=POSITIONS)

    cls = sub.add_parser("classify", help="Classify a starting hand (AKs) or hole cards (AhKh)")
    cls.add_argument("hand")
    cls.add_argument("--position", default=None)

    adj = sub.add_parser("adjust", help="Adjust a range width for action and board")
    base = adj.add_mutually_exclusive_group()
    base.add_argument("--base", type=float, default=None, help="Base range in percent")
    base.add_argument("--archetype", default=None, help="Start from an archetype's VPIP")
    adj.add_argument("--action", default=None, choices=list(ACTION_MULTIPLIERS))
    adj.add_argument("--board", default="", help="Board cards, e.g. 'Ah Kh 7h'")

    chart = sub.add_parser("chart", help="Show the RFI chart for a seat, or one hand's strategy")
    chart.add_argument("position", choices=chart_positions())
    chart.add_argument("--hand", default=None, help="Starting hand, e.g. AKs")
    chart.add_argument("--playable", action="store_true", help="List only hands that are not a pure fold")

    prc = sub.add_parser("practice", help="Deal one practice scenario and show the answer")
    prc.add_argument("--seed", type=int, default=None)
    prc.add_argument("--position", default=None)
    prc.add_argument("--dead", default="", help="Cards to keep out of the deal, e.g. 'Ah Kh'")
    return parser


def format_grid(matrix: list) -> str:
    header = "    " + " ".join(f"{r:>4}" for r in CARD_RANKS)
    lines = [header]
    for rank, row in zip(CARD_RANKS, matrix):
        lines.append(f"{rank:>3} " + " ".join(f"{v:4.2f}" if v else "   ." for v in row))
    return "\n".join(lines)


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    service = RangeService()

    try:
        if args.command == "range":
            result = service.opening_range(args.position)
            text = "\n".join(
                [
                    f"{result['position']} opening range",
                    format_grid(result["matrix"]["matrix"]),
                    (
                        f"{result['stats']['totalCombos']} combos, "
                        f"{result['stats']['rangePercentage']}% of {result['stats']['totalHands']}"
                    ),
                ]
            )
        elif args.command == "classify":
            key = "cards" if len(args.hand) == 4 else "hand"
            result = service.classify({key: args.hand, "position": args.position})
            text = f"{result['hand']}: {result['category']} (default frequency {result['default_frequency']})"
            if "correct_action" in result:
                text += f"; {result['position']} should {result['correct_action']}"
        elif args.command == "adjust":
            payload = {"action_type": args.action, "board": args.board.split()}
            if args.base is not None:
                payload["base_range_percent"] = args.base
            if args.archetype:
                payload["archetype"] = args.archetype
            result = service.adjust(payload)
            text = (
                f"{result['base_range_percent']:g}% x {result['action_multiplier']:g} "
                f"x {result['board_adjustment']:g} -> {result['adjusted_range_percent']}%"
            )
        elif args.command == "chart":
            if args.playable:
                result = service.playable_chart_hands(args.position)
                text = f"{result['position']} playable: " + " ".join(
                    f"{h['hand']}({h['actions'][0]['frequency']:g})" for h in result["hands"]
                )
            elif args.hand:
                result = service.gto_chart(args.position, args.hand)
                strategy = result["strategy"]
                text = f"{result['position']} {strategy['hand']}: " + ", ".join(
                    f"{a['action']} {a['frequency']:g}%" for a in strategy["actions"]
                ) + f" (EV {strategy['ev']:g}bb)"
            else:
                result = service.gto_chart(args.position)
                summary = result["summary"]
                text = "\n".join(
                    [
                        f"{args.position} RFI chart ({result['scenario']['stack_depth']}bb, "
                        f"open {result['scenario']['open_size']:g}bb)",
                        format_grid(result["matrix"]["matrix"]),
                        (
                            f"raise {summary['raiseFreq']}%, fold {summary['foldFreq']}%, "
                            f"{summary['playableHands']} playable hands, avg EV {summary['avgEV']:g}bb"
                        ),
                    ]
                )
        elif args.command == "practice":
            scenario = generate_practice_scenario(
                seed=args.seed, position=args.position, dead_cards=args.dead.split()
            )
            result = scenario.to_dict(reveal=True)
            text = (
                f"{result['hero_position']}: {' '.join(result['hero_hand'])} ({result['hand']}) "
                f"-> {result['correct_action']} [{result['category']}]"
            )
        else:
            raise RuntimeError(f"Unknown command: {args.command}")
    except (ValueError, KeyError) as exc:
        message = exc.args[0] if isinstance(exc, KeyError) and exc.args else str(exc)
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(result, indent=2) if args.json else text)


if __name__ == "__main__":
    main()
