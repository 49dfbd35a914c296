import pytest

from spotit.cards import Card
from spotit.errors import NoCommonSymbol
from spotit.generator import generate
from spotit.judge import RoundJudge, common_symbols, order_guesses
from spotit.models import Guess

from .helpers import create_judge, non_concurrent_triple, pair_sharing


def sharing_seven():
    return Card.of(7, 1, 2), Card.of(7, 3, 4)


def test_first_correct_guess_wins_and_scores():
    judge = create_judge("P1", "P2")
    result = judge.resolve_round(sharing_seven(), [("P1", 3, 1), ("P2", 7, 2)])
    assert result.winner == "P2"
    assert result.symbol == 7
    assert result.common_symbols == (7,)
    assert judge.players["P2"].score == 1
    assert judge.players["P1"].score == 0
    assert result.scores == {"P1": 0, "P2": 1}


def test_no_matching_guess_means_no_winner():
    judge = create_judge("P1", "P2")
    result = judge.resolve_round(sharing_seven(), [("P1", 3, 1), ("P2", 9, 2)])
    assert result.winner is None
    assert result.symbol is None
    assert not result.has_winner
    assert judge.scores() == {"P1": 0, "P2": 0}
    assert result.guesses_evaluated == 2


def test_empty_guess_list_is_a_no_winner_round():
    judge = create_judge("P1")
    result = judge.resolve_round(sharing_seven(), [])
    assert result.winner is None
    assert result.guesses_evaluated == 0
    assert result.scores == {"P1": 0}


def test_guesses_are_evaluated_by_submission_order_not_input_position():
    judge = create_judge("P1", "P2")
    result = judge.resolve_round(sharing_seven(), [Guess("P1", 7, 250), Guess("P2", 7, 120)])
    assert result.winner == "P2"
    assert judge.players["P1"].score == 0


def test_tied_submission_order_goes_to_earlier_input():
    judge = create_judge("P1", "P2")
    result = judge.resolve_round(sharing_seven(), [("P2", 7, 5), ("P1", 7, 5)])
    assert result.winner == "P2"

    result = judge.resolve_round(sharing_seven(), [("P1", 7, 5), ("P2", 7, 5)])
    assert result.winner == "P1"
    assert judge.scores() == {"P1": 1, "P2": 1}


def test_later_guesses_are_not_evaluated_after_a_win():
    judge = create_judge("P1", "P2", "P3")
    result = judge.resolve_round(
        sharing_seven(),
        [("P1", 7, 1), ("P2", 7, 2), ("P3", 3, 3)],
    )
    assert result.winner == "P1"
    assert result.guesses_evaluated == 1
    assert judge.scores() == {"P1": 1, "P2": 0, "P3": 0}


def test_unregistered_players_join_with_zero_score():
    judge = RoundJudge()
    result = judge.resolve_round(sharing_seven(), [("late", 2, 1), ("fast", 7, 2)])
    assert result.winner == "fast"
    assert judge.scores() == {"late": 0, "fast": 1}


def test_scores_accumulate_across_rounds_and_round_ids_advance():
    judge = create_judge("P1", "P2")
    ids = []
    for _ in range(3):
        ids.append(judge.resolve_round(sharing_seven(), [("P1", 7, 1)]).round_id)
    assert ids == ["R-00001", "R-00002", "R-00003"]
    assert judge.players["P1"].score == 3


def test_result_scores_are_a_snapshot():
    judge = create_judge("P1")
    result = judge.resolve_round(sharing_seven(), [("P1", 7, 1)])
    judge.resolve_round(sharing_seven(), [("P1", 7, 1)])
    assert result.scores == {"P1": 1}
    assert judge.players["P1"].score == 2


def test_deck_pairs_resolve_on_their_shared_symbol():
    deck = generate(4)
    judge = create_judge("P1")
    a, b = pair_sharing(deck, 9)
    assert common_symbols([a, b]) == frozenset({9})
    assert judge.resolve_round([a, b], [("P1", 9, 1)]).winner == "P1"


def test_three_concurrent_cards_share_their_common_symbol():
    deck = generate(3)
    holders = [card for card in deck if 5 in card][:3]
    miss = next(symbol for symbol in holders[0].symbols() if symbol != 5)
    judge = create_judge("P1", "P2")
    result = judge.resolve_round(holders, [("P1", miss, 1), ("P2", 5, 2)])
    assert result.winner == "P2"
    assert result.common_symbols == (5,)


def test_three_cards_without_common_symbol_rejected_before_scoring():
    deck = generate(3)
    triple = non_concurrent_triple(deck)
    judge = create_judge("P1")
    with pytest.raises(NoCommonSymbol) as excinfo:
        judge.resolve_round(triple, [("P1", triple[0].symbols()[0], 1)])
    assert excinfo.value.cards == triple
    assert judge.scores() == {"P1": 0}
    assert judge.round_counter == 0


def test_order_guesses_accepts_tuples_and_guesses():
    ordered = order_guesses([("b", 1, 2.5), Guess("a", 2, 1)])
    assert ordered == [Guess("a", 2, 1), Guess("b", 1, 2.5)]
    assert all(isinstance(guess, Guess) for guess in ordered)


def test_result_payload_includes_label():
    judge = create_judge("P1")
    result = judge.resolve_round((Card.of(0, 1), Card.of(0, 2)), [("P1", 0, 1)])
    payload = result.payload()
    assert payload["winner"] == "P1"
    assert payload["symbol_label"] == "Apple"
    assert payload["common_symbols"] == [0]


def test_guessers_after_the_winner_are_not_registered():
    judge = RoundJudge()
    result = judge.resolve_round(sharing_seven(), [("fast", 7, 1), ("late", 3, 2)])
    assert result.winner == "fast"
    assert result.guesses_evaluated == 1
    assert "late" not in judge.players
    assert result.scores == {"fast": 1}
