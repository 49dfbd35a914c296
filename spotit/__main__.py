import argparse
import logging
import random

from .bots import simulate_guesses
from .errors import NoCommonSymbol, SpotItError
from .field import valid_orders
from .generator import audit_deck, generate
from .models import GameConfig
from .table import Table

LOGGER = logging.getLogger("spotit")


def show_deck(args: argparse.Namespace) -> None:
    deck = generate(args.order, verify=args.verify)
    cards = deck.draw_pile(args.seed) if args.seed is not None else list(deck)
    for idx, card in enumerate(cards):
        shown = card.labels() if args.labels else [str(symbol) for symbol in card.symbols()]
        print(f"{idx:4d}: {' '.join(shown)}")
    LOGGER.info("Order %d deck: %d cards, %d symbols per card", deck.order, len(deck), deck.symbols_per_card)


def verify_decks(args: argparse.Namespace) -> int:
    failures = 0
    for order in valid_orders(args.max_order):
        problems = audit_deck(generate(order))
        if problems:
            failures += 1
            LOGGER.error("Order %d failed: %s", order, problems[0])
        else:
            print(f"order {order:3d}: ok ({order * order + order + 1} cards)")
    return failures


def play(args: argparse.Namespace) -> None:
    config = GameConfig(
        order=args.order,
        cards_per_round=args.cards_per_round,
        seed=args.seed,
        verify_deck=args.verify,
    )
    table = Table(config)
    for idx in range(args.players):
        table.seat_player(f"Player{idx}")

    rng = random.Random(table.seed)
    rounds = 0
    while rounds < args.rounds and table.can_start_round():
        try:
            ctx = table.start_round()
        except NoCommonSymbol as exc:
            LOGGER.warning("Misdeal, %s", exc)
            continue
        guesses = simulate_guesses(table.seats, ctx.cards, rng, args.accuracy)
        table.submit_guesses(guesses)
        rounds += 1

    result = table.match_result_payload()
    for entry in result["final_scores"]:
        print(f"{entry['name']:>12}: {entry['score']}")
    LOGGER.info("Played %d rounds; winners: %s", result["rounds_played"], ", ".join(result["winners"]) or "none")


def main() -> None:
    parser = argparse.ArgumentParser(description="Spot It deck generator and round judge")
    parser.add_argument("--log-level", default="INFO")
    sub = parser.add_subparsers(dest="command", required=True)

    deck_cmd = sub.add_parser("deck", help="Print the deck for an order")
    deck_cmd.add_argument("--order", type=int, default=7)
    deck_cmd.add_argument("--labels", action="store_true", help="Show fruit names instead of symbol ids")
    deck_cmd.add_argument("--seed", type=int, default=None, help="Shuffle the printed deck with this seed")
    deck_cmd.add_argument("--verify", action="store_true", help="Audit the deck before printing")

    verify_cmd = sub.add_parser("verify", help="Audit every valid order up to a limit")
    verify_cmd.add_argument("--max-order", type=int, default=13)

    play_cmd = sub.add_parser("play", help="Simulate a local game with random players")
    play_cmd.add_argument("--order", type=int, default=7)
    play_cmd.add_argument("--players", type=int, default=2)
    play_cmd.add_argument("--rounds", type=int, default=10)
    play_cmd.add_argument("--cards-per-round", type=int, default=2)
    play_cmd.add_argument("--accuracy", type=float, default=0.8, help="Chance a simulated player spots the symbol")
    play_cmd.add_argument("--seed", type=int, default=None)
    play_cmd.add_argument("--verify", action="store_true")

    args = parser.parse_args()
    if args.command == "play" and args.players < 2:
        parser.error("play needs at least two players")
    if args.command == "play" and args.cards_per_round < 2:
        parser.error("a round shows at least two cards")
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    try:
        if args.command == "deck":
            show_deck(args)
        elif args.command == "verify":
            if verify_decks(args):
                parser.exit(1)
        else:
            play(args)
    except SpotItError as exc:
        LOGGER.error("%s", exc)
        parser.exit(2)


if __name__ == "__main__":
    main()
