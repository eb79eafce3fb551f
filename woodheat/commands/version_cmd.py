"""
Version command - displays woodheat version information
"""

from woodheat.version import WOODHEAT_VERSION


def run_version(verbose: bool = False) -> None:
    """
    Display woodheat version information.

    Args:
        verbose: If True, show the source digest and release date
    """
    if verbose:
        print(f"woodheat version {WOODHEAT_VERSION.full_version()}")
        print("\nDetailed version information:")
        print(f"  Semantic Version: {WOODHEAT_VERSION}")
        print(f"  Release Date:     {WOODHEAT_VERSION.date_string()}")
        print(f"  Source Hash:      {WOODHEAT_VERSION.hash}")
    else:
        print(f"woodheat {WOODHEAT_VERSION}")
