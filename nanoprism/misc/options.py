"""
Option dictionaries for nanoprism calculations.
"""

from typing import Any, Dict, Optional


def prismoptions(op: Optional[Dict[str, Any]] = None,
        **kwargs: Any) -> Dict[str, Any]:
    """
    Standard options for a nanoprism spectrum.

    Parameters
    ----------
    op : dict, optional
        Option dictionary from previous call
    **kwargs : dict
        Additional property name-value pairs

    Returns
    -------
    op : dict
        Dictionary with standard or user-defined options

    Notes
    -----
    Defaults: silver prism with L = 50 nm, H = 20 nm, R = 2 nm in vacuum,
    wavelengths 300 - 800 nm in steps of 2 nm, size-dependent dielectric
    function, extrapolation outside the optical-constant table allowed.
    """
    if op is None:
        op = {}
        op['L'] = 50.0
        op['H'] = 20.0
        op['R'] = 2.0
        op['eps_h'] = 1.0
        op['material'] = 'silver'
        op['wl_min'] = 300.0
        op['wl_max'] = 800.0
        op['wl_step'] = 2.0
        op['size_correction'] = True
        op['strict'] = False
        op['prefix'] = 'analytic_model'

    op.update(kwargs)
    return op


def getprismoptions(*args: Any,
        **kwargs: Any) -> Dict[str, Any]:
    """
    Collect options from dictionaries, variants and name-value pairs.

    Dictionaries are merged in order.  A dictionary entry that itself
    holds a dictionary is a named variant, e.g. ``{'au': {'material':
    'gold'}}``; a list of names selects variants whose fields are applied
    on top of the merged dictionaries.  Explicit name-value pairs and
    keyword arguments are applied last.  Variant entries are not part of
    the result.

    Parameters
    ----------
    *args : dicts, lists of variant names, or name-value pairs
    **kwargs : additional keyword arguments

    Returns
    -------
    op : dict

    Examples
    --------
    >>> variants = {'gold': {'material': 'gold'}, 'water': {'eps_h': 1.77}}
    >>> op = getprismoptions(prismoptions(), variants, ['gold', 'water'], 'L', 60.0)
    """
    merged = {}
    selected = []
    pairs = {}

    args = iter(args)
    for arg in args:
        if isinstance(arg, dict):
            merged.update(arg)
        elif isinstance(arg, str):
            try:
                pairs[arg] = next(args)
            except StopIteration:
                raise ValueError(f"Option {arg!r} has no value") from None
        elif isinstance(arg, (list, tuple)):
            selected.extend(arg)
        else:
            raise TypeError(f"Cannot interpret option argument {arg!r}")

    op = {key: val for key, val in merged.items() if not isinstance(val, dict)}
    for name in selected:
        variant = merged.get(name)
        if not isinstance(variant, dict):
            raise KeyError(f"No option variant named {name!r}")
        op.update(variant)

    op.update(pairs)
    op.update(kwargs)
    return op
