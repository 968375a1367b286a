from __future__ import annotations

import numpy as np

from pipeplot import LineStyle, PlotSession, open_session


def run(session: PlotSession) -> bool:
    x = np.arange(1.0, 6.0)
    y = np.asarray([1.8, 4.1, 5.9, 8.2, 9.9])
    xerr = np.full(x.size, 0.2)
    yerr = np.asarray([0.3, 0.4, 0.2, 0.5, 0.3])

    session.set_xlabel("x")
    session.set_ylabel("measured")
    session.plot_xyerr(x, y, xerr, yerr, label="Measurements")
    session.plot(x, 2.0 * x, label="Model y = 2x", style=LineStyle.LINES)
    return session.show()


def main() -> None:
    with open_session() as session:
        run(session)
        input("Press enter to quit...")


if __name__ == "__main__":
    main()
