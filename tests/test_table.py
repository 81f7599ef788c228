from chainview.chain import load_chain
from chainview.input_dispatcher import InputDispatcher
from chainview.navigation import ScrollingNavigator
from chainview.ui import theme as THEME
from chainview.ui.table import build_columns, build_row, build_table, column_offsets

GREEK_TITLES = ["Delta", "Gamma", "Vega"]


def test_columns_with_greeks():
    titles = [c.title for c in build_columns(show_greeks=True)]
    assert titles == (
        ["Call Sym", "Bid", "Ask", "Bid Size", "Ask Size", "Volume"] + GREEK_TITLES
        + ["Strike"]
        + ["Put Sym", "Bid", "Ask", "Bid Size", "Ask Size", "Volume"] + GREEK_TITLES
    )


def test_columns_without_greeks():
    titles = [c.title for c in build_columns(show_greeks=False)]
    assert titles == [
        "Call Sym", "Bid", "Ask", "Bid Size", "Ask Size", "Volume",
        "Strike",
        "Put Sym", "Bid", "Ask", "Bid Size", "Ask Size", "Volume",
    ]


def test_theta_and_rho_never_displayed():
    titles = {c.title for c in build_columns(show_greeks=True)}
    assert "Theta" not in titles
    assert "Rho" not in titles


def test_row_formatting(chain):
    pair = chain.expirations[0].options[0]
    texts = [cell.text for cell in build_row(pair, chain.last_price, show_greeks=True)]

    assert texts[:9] == [pair.call.symbol, "1.25", "1.35", "10", "12", "100", "0.5000", "0.0421", "0.1187"]
    assert texts[9] == "95.00"
    assert texts[10:] == [pair.put.symbol, "1.25", "1.35", "10", "12", "100", "-0.5000", "0.0421", "0.1187"]


def test_strike_color_tracks_last_price(chain):
    colors = [
        build_row(pair, chain.last_price, show_greeks=False)[6].color_pair
        for pair in chain.expirations[0].options
    ]
    assert colors == [THEME.STRIKE_BELOW, THEME.STRIKE_AT, THEME.STRIKE_ABOVE]


def test_column_offsets_include_spacing():
    columns = build_columns(show_greeks=False)
    offsets = column_offsets(columns)
    assert offsets[:3] == [0, 11, 20]
    assert offsets[6] == 6 * 9 + 2


def test_toggling_greeks_removes_three_columns_per_side(chain_file):
    chain = load_chain(chain_file)
    navigator = ScrollingNavigator()
    state = navigator.initial_state(chain)
    dispatcher = InputDispatcher()
    expiration = chain.expirations[0]

    columns_on, rows_on = build_table(expiration, chain.last_price, state.show_greeks)
    assert dispatcher.dispatch(ord("g"), navigator, state)
    columns_off, rows_off = build_table(expiration, chain.last_price, state.show_greeks)

    assert chain.expiration_count == 2
    assert len(rows_on) == len(rows_off) == 3
    assert len(columns_on) - len(columns_off) == 6

    removed = [c.title for c in columns_on if c not in columns_off]
    assert removed == GREEK_TITLES * 2

    greek_positions = {6, 7, 8, 16, 17, 18}
    for row_on, row_off in zip(rows_on, rows_off):
        kept = [cell.text for i, cell in enumerate(row_on) if i not in greek_positions]
        assert kept == [cell.text for cell in row_off]
