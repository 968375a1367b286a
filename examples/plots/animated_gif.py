from __future__ import annotations

from pipeplot import PlotSession, open_session


X = [1, 2, 3, 4, 5]
Y = [5, 2, 4, 1, 3]


def run(session: PlotSession, filename: str = "animation.gif") -> bool:
    ok = session.redirect_to_animated_gif(filename, "800,600", delay_ms=1000, loop=True)
    for x, y in zip(X, Y):
        session.add_point(x, y)
        session.plot()
        # Fixed ranges keep frames from rescaling while the line grows.
        session.set_xrange(0, 6)
        session.set_yrange(0, 6)
        ok = session.show() and ok
    return ok


def main() -> None:
    with open_session() as session:
        if run(session):
            print("wrote animation.gif")


if __name__ == "__main__":
    main()
