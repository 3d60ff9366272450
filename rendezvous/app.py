from pathlib import Path

from logging_config import get_logger
from kepler.kepler import KeplerToRV
from projection.transform2d import PlaneProjector
from rendezvous.config import RendezvousConfig
from rendezvous.report import print_report, plot_projection
from tle_io.epoch import tai_mjd, tle_epoch
from tle_io.fetch import TLEFetchError, download_tle, load_tle
from tle_io.tleconverter import TLEConverter

logger = get_logger(__name__)


def obtain_tle(cfg):
    """download to cfg.tle_path (unless offline) and load it"""
    path = Path(cfg.tle_path)

    if not cfg.offline:
        try:
            download_tle(cfg.tle_url, path, timeout=cfg.timeout)
            print("[Debug] TLE file downloaded successfully!")
        except TLEFetchError as ex:
            print(ex)
            if not path.exists():
                raise
            print(f"Using previously downloaded TLE at {path}")

    return load_tle(path)


def compute(raw, cfg=None):
    """RawTLE -> elements, state vector, epoch, 2D projections"""
    if cfg is None:
        cfg = RendezvousConfig()

    kep = TLEConverter.parse(raw, check=cfg.check_tle)
    state = KeplerToRV().state(kep)

    epoch = tle_epoch(raw.line1)

    samples = PlaneProjector(cfg.sample_pos1, cfg.sample_pos2)
    points_2d = {
        "pos1": samples.project(cfg.sample_pos1),
        "pos2": samples.project(cfg.sample_pos2),
    }

    # r and v both lie in the orbital plane
    iss_plane = PlaneProjector(state.r, state.v)

    return {
        "name": raw.name,
        "kep": kep,
        "state": state,
        "epoch": epoch,
        "tai_mjd": tai_mjd(epoch),
        "points_2d": points_2d,
        "iss_2d": iss_plane.project(state.r),
    }


def run(cfg=None):
    if cfg is None:
        cfg = RendezvousConfig()

    raw = obtain_tle(cfg)
    logger.info("loaded TLE for %r", raw.name or "unnamed satellite")

    res = compute(raw, cfg)
    print_report(res)

    if cfg.plot:
        import matplotlib.pyplot as plt

        plot_projection(res["points_2d"], title="Sample positions, shared orbital plane")
        plt.show()

    return res
