"""Test consumer handlers."""
from hitcraft.core.effects import LoggerHandler, ScoreBoard
from hitcraft.core.entities import Enemy, Player


class TestScoreBoard:
    """ScoreBoard counts hits from any enemy on the channel."""

    def test_counts_three_hits(self, channel):
        board = ScoreBoard(channel)
        enemy = Enemy(entity_id=1, pos=(0.0, 0.0), channel=channel, hp=10)
        for _ in range(3):
            enemy.hit()
        assert board.enemies_hit == 3

    def test_count_unaffected_by_other_subscribers(self, channel):
        for _ in range(5):
            channel.subscribe(lambda source, event: None)
        board = ScoreBoard(channel)
        channel.subscribe(lambda source, event: None)

        enemy = Enemy(entity_id=1, pos=(0.0, 0.0), channel=channel, hp=10)
        for _ in range(3):
            enemy.hit()

        assert board.enemies_hit == 3

    def test_counts_hits_across_enemies(self, channel):
        board = ScoreBoard(channel)
        player = Player(entity_id=1, pos=(0.0, 0.0), enemy_channel=channel)
        player.shoot()
        player.shoot()
        assert board.enemies_hit == 2
        assert board.last_hit.shooter_id == 1

    def test_close_stops_counting(self, channel):
        board = ScoreBoard(channel)
        enemy = Enemy(entity_id=1, pos=(0.0, 0.0), channel=channel, hp=10)
        enemy.hit()
        board.close()
        board.close()
        enemy.hit()

        assert board.enemies_hit == 1
        assert not board.subscribed
        assert len(channel) == 0

    def test_forgotten_board_keeps_listening(self, channel):
        """Dropping the reference does not unsubscribe."""
        ScoreBoard(channel)
        assert len(channel) == 1

    def test_context_manager(self, channel):
        enemy = Enemy(entity_id=1, pos=(0.0, 0.0), channel=channel, hp=10)
        with ScoreBoard(channel) as board:
            enemy.hit()
        enemy.hit()
        assert board.enemies_hit == 1

    def test_verbose_prints(self, channel, capsys):
        ScoreBoard(channel, verbose=True)
        enemy = Enemy(entity_id=1, pos=(0.0, 0.0), channel=channel, hp=10)
        enemy.hit()
        enemy.hit()
        out = capsys.readouterr().out
        assert "1 enemies have been hit!" in out
        assert "2 enemies have been hit!" in out


class TestLoggerHandler:
    """LoggerHandler formats a line per hit."""

    def test_lines(self, channel):
        logger = LoggerHandler(channel)
        player = Player(entity_id=7, pos=(0.0, 0.0), enemy_channel=channel)
        enemy = Enemy(entity_id=3, pos=(2.0, 4.0), channel=channel, hp=2)
        player.shoot(enemy)

        assert logger.lines == ["[HIT] Enemy 3 hit by entity 7 at (2.0, 4.0), hp left: 1"]

    def test_quiet_by_default(self, channel, capsys):
        LoggerHandler(channel)
        Enemy(entity_id=3, pos=(0.0, 0.0), channel=channel).hit()
        assert capsys.readouterr().out == ""

    def test_close(self, channel):
        logger = LoggerHandler(channel)
        logger.close()
        Enemy(entity_id=3, pos=(0.0, 0.0), channel=channel).hit()
        assert logger.lines == []
