"""Magnet URI construction for catalog torrents."""
from __future__ import annotations

TRACKERS = (
    "udp://open.demonii.com:1337/announce",
    "udp://tracker.openbittorrent.com:80",
    "udp://tracker.coppersurfer.tk:6969",
    "udp://glotorrents.pw:6969/announce",
    "udp://tracker.opentrackr.org:1337/announce",
    "udp://torrent.gresille.org:80/announce",
    "udp://p4p.arenabg.com:1337",
    "udp://tracker.leechers-paradise.org:6969",
)


def build_magnet_url(info_hash: str, title: str) -> str:
    """Return a magnet link for ``info_hash`` named after ``title``.

    Spaces in the title become ``+``; nothing else is escaped.
    """

    display_name = title.replace(" ", "+")
    trackers = "".join(f"&tr={tracker}" for tracker in TRACKERS)
    return f"magnet:?xt=urn:btih:{info_hash}&dn={display_name}{trackers}"
