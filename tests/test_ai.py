from __future__ import annotations

from collections import defaultdict

import pytest

from othello import AlphaBeta, Board, Game, Minimax, Player
from othello.ai import SEARCH_INFINITY


def _best_move_board() -> Board:
    board = Board.empty()
    board.set_piece(2, 2, Player.WHITE)
    board.set_piece(3, 2, Player.BLACK)
    board.set_piece(2, 3, Player.WHITE)
    board.set_piece(3, 3, Player.BLACK)
    board.set_piece(4, 3, Player.BLACK)
    return board


@pytest.mark.parametrize("algorithm", [Minimax, AlphaBeta])
def test_finds_a_move(algorithm):
    player = algorithm(3)
    move = player.compute_move(Board.new_start(), Player.BLACK)
    assert move in Board.new_start().legal_moves(Player.BLACK)
    assert player.move_count() > 0


@pytest.mark.parametrize("algorithm", [Minimax, AlphaBeta])
def test_finds_the_best_move(algorithm):
    player = algorithm(1)
    assert player.compute_move(_best_move_board(), Player.WHITE) == (5, 3)


@pytest.mark.parametrize("algorithm", [Minimax, AlphaBeta])
def test_tie_keeps_the_first_move_in_row_major_order(algorithm):
    # The four opening moves are symmetric and evaluate the same
    player = algorithm(1)
    assert player.compute_move(Board.new_start(), Player.BLACK) == (3, 2)
    assert player.move_count() == 4


@pytest.mark.parametrize("algorithm", [Minimax, AlphaBeta])
def test_no_move(algorithm):
    player = algorithm(4)
    assert player.compute_move(Board.empty(), Player.BLACK) is None
    assert player.move_count() == 0


@pytest.mark.parametrize("algorithm", [Minimax, AlphaBeta])
def test_winning_move_ends_the_search(algorithm):
    board = Board.empty()
    board.set_piece(0, 0, Player.BLACK)
    board.set_piece(1, 0, Player.WHITE)
    player = algorithm(4)
    assert player.compute_move(board, Player.BLACK) == (2, 0)
    assert player.move_count() == 1


@pytest.mark.parametrize("algorithm", [Minimax, AlphaBeta])
def test_search_follows_forced_passes(algorithm, forced_pass_board):
    # White is blocked after either black move, so Black plays twice and wins
    player = algorithm(2)
    assert player.compute_move(forced_pass_board, Player.BLACK) == (2, 0)
    assert player.move_count() == 4


def test_move_count_is_cumulative():
    player = Minimax(1)
    player.compute_move(Board.new_start(), Player.BLACK)
    player.compute_move(Board.new_start(), Player.WHITE)
    assert player.move_count() == 8


def test_search_does_not_modify_the_board():
    board = Board.new_start()
    AlphaBeta(3).compute_move(board, Player.BLACK)
    assert board == Board.new_start()


@pytest.mark.parametrize("depth", [0, -1])
def test_depth_must_be_positive(depth):
    with pytest.raises(ValueError):
        Minimax(depth)
    with pytest.raises(ValueError):
        AlphaBeta(depth)


def _compare(minimax: Minimax, alpha_beta: AlphaBeta, board: Board, player: Player):
    minimax_before = minimax.move_count()
    alpha_beta_before = alpha_beta.move_count()
    minimax_move = minimax.compute_move(board, player)
    alpha_beta_move = alpha_beta.compute_move(board, player)
    assert alpha_beta_move == minimax_move
    assert alpha_beta.move_count() - alpha_beta_before <= minimax.move_count() - minimax_before
    return alpha_beta_move


def test_alpha_beta_behaves_like_minimax_at_depth_3():
    minimax = Minimax(3)
    alpha_beta = AlphaBeta(3)
    game = Game()
    for _ in range(6):
        player = game.player()
        move = _compare(minimax, alpha_beta, game.board, player)
        game.play(player, *move)
    assert alpha_beta.move_count() < minimax.move_count()


def test_alpha_beta_behaves_like_minimax_on_a_whole_game():
    minimax = Minimax(2)
    alpha_beta = AlphaBeta(2)
    game = Game()
    while not game.game_over():
        player = game.player()
        move = _compare(minimax, alpha_beta, game.board, player)
        assert move is not None
        game.play(player, *move)
    assert game.player() is None


class WindowRecorder(AlphaBeta):
    """AlphaBeta keeping, in call order, the window each node was searched with."""

    def __init__(self, depth: int) -> None:
        super().__init__(depth)
        self.nodes = []

    def _alphabeta(self, board, player, depth, alpha, beta):
        node = {"player": player, "depth": depth, "alpha": alpha, "beta": beta}
        self.nodes.append(node)
        best_move = super()._alphabeta(board, player, depth, alpha, beta)
        node["evaluation"] = best_move.evaluation
        return best_move


def _check_windows(nodes):
    """Every child gets the parent's window tightened by the siblings searched before it.

    Cutoffs compare against the parent's own bounds and end the parent's search.
    """
    root = nodes[0]
    assert (root["alpha"], root["beta"]) == (-SEARCH_INFINITY, SEARCH_INFINITY)

    children = defaultdict(list)
    last_at_depth = {}
    for index, node in enumerate(nodes):
        if node["depth"] > 1:
            children[last_at_depth[node["depth"] - 1]].append(node)
        last_at_depth[node["depth"]] = index

    tightened = 0
    for parent_index, kids in children.items():
        parent = nodes[parent_index]
        alpha, beta = parent["alpha"], parent["beta"]
        best = None
        for position, child in enumerate(kids):
            assert (child["alpha"], child["beta"]) == (alpha, beta)
            if (alpha, beta) != (parent["alpha"], parent["beta"]):
                tightened += 1
            evaluation = child["evaluation"]
            if parent["player"] is Player.BLACK:
                best = evaluation if best is None else max(best, evaluation)
                cut = best >= parent["beta"]
                alpha = max(alpha, best)
            else:
                best = evaluation if best is None else min(best, evaluation)
                cut = best <= parent["alpha"]
                beta = min(beta, best)
            if cut:
                assert position == len(kids) - 1
    assert tightened > 0


def test_last_ply_is_never_pruned():
    # 4 openings, 3 replies each: static evaluations don't cut
    alpha_beta = AlphaBeta(2)
    minimax = Minimax(2)
    assert alpha_beta.compute_move(Board.new_start(), Player.BLACK) == (3, 2)
    assert minimax.compute_move(Board.new_start(), Player.BLACK) == (3, 2)
    assert alpha_beta.move_count() == minimax.move_count() == 16


def test_alpha_beta_prunes_from_the_start_position():
    alpha_beta = AlphaBeta(3)
    minimax = Minimax(3)
    assert alpha_beta.compute_move(Board.new_start(), Player.BLACK) == minimax.compute_move(
        Board.new_start(), Player.BLACK
    )
    assert alpha_beta.move_count() < minimax.move_count()


@pytest.mark.parametrize("depth", [3, 4])
def test_window_is_tightened_between_siblings(depth):
    recorder = WindowRecorder(depth)
    recorder.compute_move(Board.new_start(), Player.BLACK)
    _check_windows(recorder.nodes)


def test_window_is_tightened_between_siblings_in_midgame():
    game = Game()
    for _ in range(8):
        game.play(game.player(), *game.legal_moves()[0])
    recorder = WindowRecorder(3)
    move = recorder.compute_move(game.board, game.player())
    assert move == Minimax(3).compute_move(game.board, game.player())
    _check_windows(recorder.nodes)
