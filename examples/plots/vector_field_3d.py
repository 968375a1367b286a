from __future__ import annotations

import numpy as np

from pipeplot import PlotSession, open_session


def run(session: PlotSession, steps: int = 6) -> bool:
    t = np.linspace(0.0, 2.0 * np.pi, steps, endpoint=False)
    x, y, z = np.cos(t), np.sin(t), t / (2.0 * np.pi)
    vx, vy, vz = -0.3 * np.sin(t), 0.3 * np.cos(t), np.full(steps, 0.05)

    session.plot3d(x, y, z, label="Helix")
    session.plot_vectors3d(x, y, z, vx, vy, vz, label="Tangent")
    session.set_zrange(0, 1)
    return session.show()


def main() -> None:
    with open_session() as session:
        run(session)
        input("Press enter to quit...")


if __name__ == "__main__":
    main()
