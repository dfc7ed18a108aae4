BASE_PORT = 3333

ENCODING = "ascii"
LINE_END = "\n"


class Server:
    GAME_OVER = -999
    HEADER_LINES = 4    # turn, round, t1, t2
    BOARD_CELLS = 64
    STATE_LINES = HEADER_LINES + BOARD_CELLS
    INIT_FIELDS = 2     # <player_number> <game_minutes>


class Client:
    PASS_ROW = -1
    PASS_COL = -1
    PASS = (PASS_ROW, PASS_COL)
