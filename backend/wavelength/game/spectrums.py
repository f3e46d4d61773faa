from __future__ import annotations

import random

from .models import Spectrum


DEFAULT_SPECTRUMS: tuple[Spectrum, ...] = (
    Spectrum("Not Cheating", "Is Cheating"),
    Spectrum("Feminine", "Masculine"),
    Spectrum("Cold", "Hot"),
    Spectrum("Weak", "Strong"),
    Spectrum("Evil", "Good"),
    Spectrum("Cheap", "Expensive"),
    Spectrum("Boring", "Exciting"),
    Spectrum("Quiet", "Loud"),
    Spectrum("Simple", "Complex"),
    Spectrum("Soft", "Hard"),
    Spectrum("Useless", "Useful"),
    Spectrum("Overrated", "Underrated"),
    Spectrum("Rare", "Common"),
    Spectrum("Sad", "Happy"),
)


def pick_spectrum(
    rng: random.Random | None = None,
    spectrums: tuple[Spectrum, ...] = DEFAULT_SPECTRUMS,
) -> Spectrum:
    if not spectrums:
        raise ValueError("spectrum catalog is empty")
    return (rng or random).choice(spectrums)
