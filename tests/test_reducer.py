import pytest

from rover.engine.reducer import (
    parse_instructions,
    parse_start,
    render,
    run,
    safe_parse_instructions,
    safe_parse_start,
    safe_run,
    step,
    trace,
)
from rover.utils.enums import Command, Heading
from rover.utils.errors import InvalidInstructionFormat, InvalidStartFormat
from rover.utils.types import RoverState
from tests.conftest import make_state


@pytest.mark.parametrize("start, instructions, expected", [
    ("1 2 N", "", "1 2 N"),
    ("1 2 N", "L", "1 2 W"),
    ("1 2 W", "L", "1 2 S"),
    ("1 2 S", "L", "1 2 E"),
    ("1 2 E", "L", "1 2 N"),
    ("1 2 N", "R", "1 2 E"),
    ("1 2 E", "R", "1 2 S"),
    ("1 2 S", "R", "1 2 W"),
    ("1 2 W", "R", "1 2 N"),
    ("1 2 N", "M", "1 3 N"),
    ("1 2 E", "M", "2 2 E"),
    ("1 2 S", "M", "1 1 S"),
    ("1 2 W", "M", "0 2 W"),
    ("1 2 N", "LMLMLMLMM", "1 3 N"),
    ("3 3 E", "MMRMMRMRRM", "5 1 E"),
    ("0 0 N", "M", "0 1 N"),
    ("0 0 N", "LMLMLMLMM", "0 1 N"),
    ("0 0 W", "M", "-1 0 W"),
    ("0 0 S", "MMLM", "1 -2 E"),
])
def test_run_scenarios(start, instructions, expected):
    assert render(run(parse_start(start), instructions)) == expected


class TestParseStart:

    def test_valid(self):
        assert parse_start("5 7 W") == RoverState.at(5, 7, Heading.WEST)

    def test_leading_zeros_are_accepted(self):
        assert parse_start("007 0 N") == RoverState.at(7, 0, Heading.NORTH)

    @pytest.mark.parametrize("text", [
        "5 5 Q",
        "invalid",
        "",
        "1 2",
        "1  2 N",
        " 1 2 N",
        "1 2 N ",
        "1 2 N\n",
        "-1 2 N",
        "1 2 n",
        "1.5 2 N",
        "1 2 NE",
        "٣ 2 N",
        "1" * 5000 + " 0 N",
        "0 " + "9" * 4301 + " E",
    ])
    def test_rejects_malformed(self, text):
        with pytest.raises(InvalidStartFormat) as exc_info:
            parse_start(text)
        assert exc_info.value.text == text

    def test_longest_coordinates_still_parse(self):
        digits = "9" * 4300
        state = parse_start(f"{digits} 0 N")
        assert render(state) == f"{digits} 0 N"

    def test_oversized_coordinate_is_a_typed_failure(self):
        result = safe_parse_start("1" * 5000 + " 0 N")
        assert not result.success
        assert isinstance(result.error, InvalidStartFormat)

    def test_rejects_non_string(self):
        with pytest.raises(InvalidStartFormat):
            parse_start(None)


class TestParseInstructions:

    def test_empty_is_valid(self):
        assert parse_instructions("") == []

    def test_valid(self):
        assert parse_instructions("LRM") == [Command.TURN_LEFT, Command.TURN_RIGHT, Command.MOVE]

    @pytest.mark.parametrize("text", ["LRMX", "X", "l", "L M", "M\n", "MM1"])
    def test_rejects_malformed(self, text):
        with pytest.raises(InvalidInstructionFormat):
            parse_instructions(text)


class TestStep:

    @pytest.mark.parametrize("heading", list(Heading))
    def test_left_then_right_is_identity(self, heading):
        state = make_state(3, 4, heading)
        assert step(step(state, Command.TURN_LEFT), Command.TURN_RIGHT) == state

    @pytest.mark.parametrize("heading", list(Heading))
    @pytest.mark.parametrize("command", [Command.TURN_LEFT, Command.TURN_RIGHT])
    def test_four_turns_close_the_cycle(self, heading, command):
        state = make_state(0, 0, heading)
        for _ in range(4):
            state = step(state, command)
        assert state.heading == heading

    @pytest.mark.parametrize("heading, delta", [
        (Heading.NORTH, (0, 1)),
        (Heading.EAST, (1, 0)),
        (Heading.SOUTH, (0, -1)),
        (Heading.WEST, (-1, 0)),
    ])
    def test_move_changes_one_axis(self, heading, delta):
        moved = step(make_state(2, 2, heading), Command.MOVE)
        assert (moved.x - 2, moved.y - 2) == delta
        assert moved.heading == heading

    def test_turns_keep_position(self):
        state = make_state(-4, 9, Heading.SOUTH)
        for command in (Command.TURN_LEFT, Command.TURN_RIGHT):
            assert step(state, command).position == state.position

    def test_does_not_mutate_input(self, origin):
        before = origin.model_copy()
        step(origin, Command.MOVE)
        step(origin, Command.TURN_LEFT)
        assert origin == before

    def test_accepts_plain_characters(self, origin):
        assert step(origin, "M") == make_state(0, 1)

    def test_unknown_command(self, origin):
        with pytest.raises(InvalidInstructionFormat):
            step(origin, "X")


class TestRunAndTrace:

    @pytest.mark.parametrize("heading", list(Heading))
    def test_empty_instructions_return_initial_state(self, heading):
        state = make_state(1, 1, heading)
        assert run(state, "") == state
        assert run(state, []) == state

    def test_accepts_parsed_commands(self, origin):
        assert run(origin, parse_instructions("MRM")) == make_state(1, 1, Heading.EAST)

    def test_invalid_instructions_fail_before_any_step(self, origin):
        with pytest.raises(InvalidInstructionFormat):
            run(origin, "MMX")
        with pytest.raises(InvalidInstructionFormat):
            run(origin, ["M", "Q"])

    def test_deterministic(self, origin):
        assert run(origin, "MMRMLM") == run(origin, "MMRMLM")

    def test_trace_keeps_every_state(self, origin):
        states = trace(origin, "MRM")
        assert [render(s) for s in states] == ["0 0 N", "0 1 N", "0 1 E", "1 1 E"]
        assert states[-1] == run(origin, "MRM")

    def test_trace_of_nothing(self, origin):
        assert trace(origin, "") == [origin]


class TestRender:

    def test_render_matches_str(self):
        for state in trace(parse_start("0 0 W"), "MMLMRRMMM"):
            assert render(state) == str(state)

    def test_negative_coordinates(self):
        assert render(make_state(-12, -3, Heading.WEST)) == "-12 -3 W"

    @pytest.mark.parametrize("start, instructions", [
        ("0 0 N", "MMRMMLM"),
        ("5 5 E", "LLMRMMR"),
        ("10 0 S", "RRMMMM"),
        ("3 3 W", ""),
    ])
    def test_round_trip_on_non_negative_states(self, start, instructions):
        for state in trace(parse_start(start), instructions):
            assert parse_start(render(state)) == state

    def test_negative_render_is_not_a_valid_start(self):
        rendered = render(run(parse_start("0 0 W"), "M"))
        assert rendered == "-1 0 W"
        with pytest.raises(InvalidStartFormat):
            parse_start(rendered)


class TestSafeVariants:

    def test_safe_parse_start(self):
        assert safe_parse_start("1 2 N").value == make_state(1, 2)
        result = safe_parse_start("5 5 Q")
        assert not result.success
        assert isinstance(result.error, InvalidStartFormat)

    def test_safe_parse_instructions(self):
        assert safe_parse_instructions("").value == []
        result = safe_parse_instructions("LRMX")
        assert not result.success
        assert isinstance(result.error, InvalidInstructionFormat)

    def test_safe_run(self, origin):
        assert safe_run(origin, "M").unwrap() == make_state(0, 1)
        result = safe_run(origin, "X")
        assert not result.success
        assert result.value is None
