from __future__ import annotations

import numpy as np

from pipeplot import PlotSession, open_session


def run(session: PlotSession, seed: int = 7, bins: int = 20) -> bool:
    rng = np.random.default_rng(seed)
    values = rng.normal(loc=0.0, scale=1.0, size=2000)
    session.histogram(values, bins, label="N(0, 1) samples")
    return session.show()


def main() -> None:
    with open_session() as session:
        session.redirect_to_dumb()
        run(session)


if __name__ == "__main__":
    main()
