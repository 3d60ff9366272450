import numpy as np


def _vec(v, unit):
    x, y, z = v
    return f"[{x:.3f}, {y:.3f}, {z:.3f}] {unit}"


def format_report(res):
    """
    Labeled lines for the result dict of rendezvous.app.compute().
    """
    kep = res["kep"]
    sv = res["state"]
    lines = []

    if res.get("name"):
        lines.append(f"Satellite: {res['name']}")

    lines.append(str(kep))
    lines += [
        f"Position (ECI): {_vec(sv.r, 'm')}",
        f"Velocity (ECI): {_vec(sv.v, 'm/s')}",
        f"|r| = {np.linalg.norm(sv.r) / 1000.0:.3f} km   |v| = {np.linalg.norm(sv.v):.3f} m/s",
        f"Epoch (UTC): {res['epoch']}",
        f"Epoch (TAI MJD): {res['tai_mjd']:.8f}",
    ]

    for label, (x, y) in res["points_2d"].items():
        lines.append(f"2D {label}: ({x:.3f}, {y:.3f})")

    if "iss_2d" in res:
        x, y = res["iss_2d"]
        lines.append(f"2D ISS in own orbital plane: ({x / 1000.0:.3f}, {y / 1000.0:.3f}) km")

    return "\n".join(lines)


def print_report(res):
    print("===================================================")
    print("RENDEZ-VOUS WITH ISS")
    print("===================================================")
    print(format_report(res))


def plot_projection(points_2d, title="Orbital plane projection"):
    """points_2d: {label: (x, y)}. Returns the figure; caller decides to show."""
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots()
    ax.scatter([0.0], [0.0], marker="+", color="k", label="origin")
    for label, (x, y) in points_2d.items():
        ax.scatter([x], [y], label=label)
    ax.set_xlabel("x (in-plane)")
    ax.set_ylabel("y (in-plane)")
    ax.set_title(title)
    ax.set_aspect("equal", adjustable="datalim")
    ax.grid(True)
    ax.legend()
    return fig
