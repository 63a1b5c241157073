from __future__ import annotations

import math

import pytest

from krishicash_backend.game_logic.catalog import SAVING_GOALS
from krishicash_backend.game_logic.configuration import EconomyConfiguration
from krishicash_backend.game_logic.rules import (
    amortize_debt,
    apply_event_cost,
    apply_loan,
    assess_outcome,
    check_income_growth,
    compute_stability,
    derive_lessons,
    goal_met,
    loan_interest_rate,
    next_goal,
    scale_event,
    scaled_expenses,
    scaled_premium,
    total_expenses,
)
from krishicash_backend.shared import (
    MAX_TRANSACTION_AMOUNT,
    DeterministicRandomService,
    OutcomeTier,
    is_transaction_amount,
    round_currency,
    round_half_up,
)


def test_round_half_up_rounds_halves_away_from_zero() -> None:
    assert round_half_up(42.5) == 43
    assert round_half_up(2.5) == 3
    assert round_half_up(2.4999) == 2
    assert round_currency(16.665) == 16.67


def test_scaled_expenses_follow_the_multiplier(
    configuration: EconomyConfiguration,
) -> None:
    base = scaled_expenses(1.0, configuration)
    harder = scaled_expenses(1.15, configuration)

    assert (base.household, base.farming, base.education) == (3000, 2500, 1000)
    assert base.total == 6500
    assert (harder.household, harder.farming, harder.education) == (3450, 2875, 1150)
    assert total_expenses(1.15, configuration) == 7475
    assert scaled_premium(1.15, configuration) == 575


def test_scale_event_grows_costs_faster_than_rewards(
    configuration: EconomyConfiguration, event_by_id
) -> None:
    pest = scale_event(event_by_id("crop_loss_1"), 1.3, configuration)
    harvest = scale_event(event_by_id("good_rain_1"), 1.15, configuration)
    offer = scale_event(event_by_id("loan_offer_1"), 1.3, configuration)

    assert pest.cost == 3900
    assert pest.reward is None
    assert harvest.reward == 2575
    assert offer.cost is None and offer.reward is None
    assert event_by_id("crop_loss_1").cost == 3000


def test_seeded_random_service_is_reproducible() -> None:
    population = list(range(50))
    first = DeterministicRandomService(seed=11)
    second = DeterministicRandomService(seed=11)

    draws = [first.choice(population) for _ in range(10)]

    assert draws == [second.choice(population) for _ in range(10)]
    with pytest.raises(ValueError):
        first.choice([])


def test_compute_stability_starts_near_the_middle(
    configuration: EconomyConfiguration, make_state
) -> None:
    assert compute_stability(make_state(), configuration) == 43


def test_compute_stability_is_bounded(
    configuration: EconomyConfiguration, make_state
) -> None:
    wealthy = make_state(
        balance=100_000,
        savings=100_000,
        has_insurance=True,
        insurance_premium=500,
    )
    broke = make_state(balance=-100_000, debt=100_000)

    assert compute_stability(wealthy, configuration) == 100
    assert compute_stability(broke, configuration) == 0


def test_amortize_debt_is_limited_by_available_cash(
    configuration: EconomyConfiguration,
) -> None:
    assert amortize_debt(6000, 5500, configuration) == 1000
    assert amortize_debt(6000, 300, configuration) == 300
    assert amortize_debt(6000, -50, configuration) == 0
    assert amortize_debt(0, 5000, configuration) == 0
    assert amortize_debt(100, 5000, configuration) == 16.67


def test_apply_loan_adds_interest_up_front(
    configuration: EconomyConfiguration, make_state
) -> None:
    outcome = apply_loan(make_state(balance=0), 5000, configuration)

    assert outcome.balance == 5000
    assert outcome.debt == 6000
    assert outcome.interest == 1000
    assert loan_interest_rate(1.15, configuration) == pytest.approx(0.2075)


def test_insurance_caps_crop_losses_only(
    configuration: EconomyConfiguration, make_state, event_by_id
) -> None:
    insured = make_state(has_insurance=True, insurance_premium=500)
    uninsured = make_state()

    assert apply_event_cost(insured, event_by_id("crop_loss_1"), configuration) == 500
    assert apply_event_cost(uninsured, event_by_id("crop_loss_1"), configuration) == 3000
    assert apply_event_cost(insured, event_by_id("medical_1"), configuration) == 2000
    assert apply_event_cost(insured, event_by_id("bonus_1"), configuration) == 0


def test_income_growth_requires_months_and_amount(
    configuration: EconomyConfiguration, make_state
) -> None:
    earned = make_state(consecutive_saving_months=3, total_saved_this_streak=6000)
    too_short = make_state(consecutive_saving_months=2, total_saved_this_streak=9000)
    too_little = make_state(consecutive_saving_months=5, total_saved_this_streak=5999)
    harder = earned.evolve(difficulty_multiplier=1.15)

    growth = check_income_growth(earned, configuration)

    assert growth is not None
    assert growth.bonus == 1500
    assert growth.new_income == 13500
    assert check_income_growth(too_short, configuration) is None
    assert check_income_growth(too_little, configuration) is None
    assert check_income_growth(harder, configuration).bonus == 1725


def test_goal_progression(make_state) -> None:
    assert goal_met(make_state(savings=15000))
    assert not goal_met(make_state(savings=14999.99))
    assert next_goal(()) == SAVING_GOALS[0]
    assert next_goal(("emergency_fund", "tractor")) == SAVING_GOALS[1]
    assert next_goal(tuple(goal.id for goal in SAVING_GOALS)) is None


@pytest.mark.parametrize(
    ("score", "tier"),
    [
        (95, OutcomeTier.SECURE),
        (81, OutcomeTier.SECURE),
        (80, OutcomeTier.STABLE),
        (51, OutcomeTier.STABLE),
        (50, OutcomeTier.VULNERABLE),
        (0, OutcomeTier.VULNERABLE),
    ],
)
def test_assess_outcome_thresholds(make_state, score: int, tier: OutcomeTier) -> None:
    assert assess_outcome(make_state(stability_score=score)).tier is tier


def test_derive_lessons_for_a_strong_run(
    configuration: EconomyConfiguration, make_state
) -> None:
    state = make_state(
        savings=12000,
        monthly_income=16000,
        stability_score=85,
        completed_goals=("emergency_fund", "dairy_cow", "drip_irrigation"),
    )

    lessons = derive_lessons(state, configuration)

    assert len(lessons) == 5
    assert all(lesson.positive for lesson in lessons)
    assert lessons[0].text == "Amazing! You completed 3 major goals!"


def test_derive_lessons_for_a_weak_run(
    configuration: EconomyConfiguration, make_state
) -> None:
    state = make_state(savings=1000, debt=500, balance=200)

    texts = [lesson.text for lesson in derive_lessons(state, configuration)]

    assert texts == [
        "Try to save more regularly to build emergency funds.",
        "High-interest loans hurt your finances. Avoid when possible.",
    ]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0.01, True),
        (MAX_TRANSACTION_AMOUNT, True),
        (0, False),
        (-10, False),
        (MAX_TRANSACTION_AMOUNT + 1, False),
        (1e27, False),
        (math.inf, False),
        (math.nan, False),
    ],
)
def test_is_transaction_amount(value: float, expected: bool) -> None:
    assert is_transaction_amount(value) is expected
