"""Tests for the console game loop and config loading."""

import pytest

from src.main import load_config, read_tokens, run_game, take
from src.session import Game, GameClock, GameConfig

LETTERS = list("acrlneappusteory")


class Output:
    """Collects everything the game loop writes."""

    def __init__(self):
        self.lines = []

    def __call__(self, *args, end="\n", flush=False):
        self.lines.append(" ".join(str(a) for a in args) + end)

    @property
    def text(self) -> str:
        return "".join(self.lines)


class FrozenTime:
    def __call__(self) -> float:
        return 0.0


@pytest.fixture
def game(dictionary):
    clock = GameClock(total_seconds=60, now=FrozenTime())
    return Game.create(config=GameConfig(), dictionary=dictionary, letters=LETTERS, clock=clock)


def play(game, text):
    out = Output()
    reason = run_game(game, read_tokens(text.splitlines(keepends=True)), write=out)
    return reason, out.text


class TestTokens:
    """Test cases for input tokenizing."""

    def test_read_tokens(self):
        assert list(read_tokens(["cat dog\n", "\n", "  x\n"])) == ["cat", "dog", "x"]

    def test_take_exact(self):
        tokens = iter(["a", "b", "c"])
        assert take(tokens, 2) == ["a", "b"]
        assert next(tokens) == "c"

    def test_take_short_input(self):
        assert take(iter(["a"]), 2) is None


class TestRunGame:
    """Test cases for the interactive loop."""

    def test_words_and_exit(self, game):
        reason, text = play(game, "cat\ndog\nacre\ncat\nx\n")
        assert reason == "Player exited"
        assert "Worth 1 points." in text
        assert "dog cannot be formed on this board." in text
        assert "acre was not found in the dictionary\n" in text
        assert "Sorry, that word was already previously found." in text
        assert "Words so far are: cat" in text
        assert game.score == 1

    def test_end_of_input(self, game):
        reason, _ = play(game, "cat\n")
        assert reason == "End of input"

    def test_solve_exits(self, game):
        reason, text = play(game, "s\n3 4\n")
        assert reason == "Board solved"
        assert "3 letters (3): cat pus sap" in text
        assert "4 letters (3): pest rust sour" in text

    def test_solve_bad_lengths(self, game):
        reason, text = play(game, "s\nthree four\nx\n")
        assert "Word lengths must be two numbers." in text
        assert reason == "Player exited"

    def test_reset_reads_letters_across_lines(self, game):
        """A reset waits for all 16 letters, however they are split."""
        reason, text = play(game, "cat\nr\nd o g s d o g s\nd o g s\nd o g s\ndog\nx\n")
        assert reason == "Player exited"
        assert game.board.letters() == list("dogs" * 4)
        assert game.found_words() == ["dog"]
        assert game.score == 1

    def test_reset_letters_typed_together(self, game):
        """Letters typed without spaces fill the board one character each."""
        reason, text = play(game, "r\nzzzzzzzzzzzzzzzz\ncat\nx\n")
        assert reason == "Player exited"
        assert game.board.letters() == ["z"] * 16
        assert game.history[0].word == "cat"
        assert "cat cannot be formed on this board." in text

    def test_reset_mixed_spacing(self, game):
        """Groups of letters of any size are accepted."""
        play(game, "r\nacrl neap\npu s t eory\nx\n")
        assert game.board.letters() == LETTERS

    def test_status_shows_timer(self, game):
        """The countdown is shown while the timer runs and hidden when it is off."""
        _, text = play(game, "t\nx\n")
        assert text.count("60 Seconds Remaining") == 1
        assert "     Score: 0" in text

    def test_reset_cut_short(self, game):
        """Running out of input during a reset leaves the board alone."""
        reason, _ = play(game, "r\na b c\n")
        assert reason == "End of input"
        assert game.board.letters() == LETTERS

    def test_reset_invalid_letters(self, game):
        reason, text = play(game, "r\n1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6\nx\n")
        assert "Board not changed" in text
        assert game.board.letters() == LETTERS

    def test_toggle_timer(self, game):
        _, text = play(game, "t\nt\nx\n")
        assert "Timer has been shut off" in text
        assert "Timer is back on" in text
        assert game.clock.paused is False

    def test_time_up(self, dictionary):
        """The last move finishes before the game ends."""
        now = {"t": 0.0}
        clock = GameClock(total_seconds=10, now=lambda: now["t"])
        game = Game.create(config=GameConfig(), dictionary=dictionary, letters=LETTERS, clock=clock)

        def tokens():
            now["t"] = 20.0
            yield "cat"
            yield "sap"

        out = Output()
        reason = run_game(game, tokens(), write=out)
        assert reason == "Time is up"
        assert game.found_words() == ["cat"]
        assert "Time is up!" in out.text


class TestLoadConfig:
    """Test cases for YAML configuration."""

    def test_no_file(self):
        assert load_config() == GameConfig()

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("seconds_to_play: 90\nseed: 3\n")
        config = load_config(str(path))
        assert config.seconds_to_play == 90
        assert config.seed == 3

    def test_overrides(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("dictionary_path: words.txt\nseed: 3\n")
        config = load_config(str(path), dictionary_path="other.txt", seed=None)
        assert config.dictionary_path == "other.txt"
        assert config.seed == 3

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))
