import logging

import numpy as np
import pygame

logger = logging.getLogger(__name__)


def make_sine_sound(freq=440, duration=0.12, volume=0.2, sample_rate=44100):
    """Generate a pygame Sound with a sine wave tone."""
    t = np.linspace(0, duration, int(sample_rate * duration), False)
    wave = volume * np.sin(2 * np.pi * freq * t)
    # Apply quick envelope
    env = np.ones_like(wave)
    attack = min(len(env), int(0.01 * sample_rate))
    release = min(len(env) - attack, int(0.03 * sample_rate))
    env[:attack] = np.linspace(0, 1, attack)
    if release:
        env[-release:] = np.linspace(1, 0, release)
    wave = (wave * env * (2**15 - 1)).astype(np.int16)
    stereo = np.column_stack([wave, wave])
    return pygame.sndarray.make_sound(stereo)


def make_sweep_sound(start_freq, end_freq, duration=0.3, volume=0.3, sample_rate=44100):
    """Tone gliding from start_freq to end_freq, used for die / level up."""
    n = int(sample_rate * duration)
    freqs = np.linspace(start_freq, end_freq, n)
    phase = 2 * np.pi * np.cumsum(freqs) / sample_rate
    wave = volume * np.sin(phase) * np.linspace(1, 0, n)
    wave = (wave * (2**15 - 1)).astype(np.int16)
    stereo = np.column_stack([wave, wave])
    return pygame.sndarray.make_sound(stereo)


# name -> factory; generated lazily once the mixer is up
SOUND_SPECS = {
    'start': lambda: make_sine_sound(freq=880, duration=0.12, volume=0.25),
    'move': lambda: make_sine_sound(freq=200, duration=0.04, volume=0.05),
    'eat': lambda: make_sine_sound(freq=660, duration=0.10, volume=0.22),
    'bomb': lambda: make_sweep_sound(300, 90, duration=0.25, volume=0.3),
    'die': lambda: make_sweep_sound(440, 110, duration=0.35, volume=0.35),
    'levelup': lambda: make_sweep_sound(550, 1100, duration=0.25, volume=0.25),
    'achievement': lambda: make_sine_sound(freq=1320, duration=0.2, volume=0.25),
}


class SoundBoard:
    """Plays generated effects. Any audio failure is logged and ignored."""

    def __init__(self):
        self.sounds = {}
        try:
            # Ensure mixer initialized
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            for name, factory in SOUND_SPECS.items():
                self.sounds[name] = factory()
        except (pygame.error, ValueError) as e:
            logger.warning("Audio unavailable, continuing without sound: %s", e)
            self.sounds = {}

    def play(self, name):
        sound = self.sounds.get(name)
        if sound is None:
            return
        try:
            sound.stop()
            sound.play()
        except pygame.error as e:
            logger.debug("Could not play %s: %s", name, e)
