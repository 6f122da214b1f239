"""
audio.py — ระบบเสียง (procedural, ไม่ต้องใช้ไฟล์เสียงภายนอก)
"""
import io
import math
import random
import struct
import wave
import pygame

SR = 22050


def _wav(samples, sr=SR):
    """แปลงลิสต์ตัวเลข (-1..1) เป็น WAV ใน memory"""
    buf = io.BytesIO()
    with wave.open(buf, 'wb') as w:
        w.setnchannels(1); w.setsampwidth(2); w.setframerate(sr)
        w.writeframes(b"".join(struct.pack("<h", max(-32767, min(32767, int(s * 32767))))
                               for s in samples))
    buf.seek(0)
    return buf


def tone(f, dur, vol=0.3, sr=SR):
    n = int(sr * dur)
    return [vol * math.sin(2 * math.pi * f * i / sr) * (1 - i / n) ** 0.5 for i in range(n)]


def chirp(f0, f1, dur, vol=0.3, sr=SR):
    """Frequency sweep f0 → f1 with a sine envelope"""
    n = int(sr * dur); out = []; ph = 0.0
    for i in range(n):
        ph += 2 * math.pi * (f0 + (f1 - f0) * i / n) / sr
        out.append(vol * math.sin(ph) * math.sin(math.pi * i / n))
    return out


def swoosh(dur, vol=0.25, sr=SR):
    rng = random.Random(11)
    n = int(sr * dur); out = []; lp = 0.0
    for i in range(n):
        lp += (rng.uniform(-1, 1) - lp) * 0.08   # low-passed noise
        out.append(vol * 4 * lp * math.sin(math.pi * i / n))
    return out


def ambient_loop(dur=6.0, sr=SR):
    """Wind bed + cricket trills, edges cross-faded so it loops cleanly"""
    rng = random.Random(777)
    n = int(sr * dur)
    buf = [0.0] * n

    # Layer 1 — wind
    lp = 0.0
    for i in range(n):
        lp += (rng.uniform(-1, 1) - lp) * 0.01
        buf[i] += 1.6 * lp * (0.6 + 0.4 * math.sin(2 * math.pi * 0.25 * i / sr))

    # Layer 2 — crickets
    for _ in range(14):
        f  = rng.uniform(3800, 4800)
        cs = int(rng.uniform(0, dur - 0.4) * sr)
        for p in range(rng.randint(3, 6)):
            ps = cs + int(p * 0.06 * sr); pl = int(0.035 * sr)
            for i in range(min(pl, n - ps)):
                buf[ps + i] += 0.05 * math.sin(2 * math.pi * f * i / sr) * math.sin(math.pi * i / pl)

    mx = max(abs(x) for x in buf) or 1.0
    buf = [x / mx * 0.4 for x in buf]
    fade = int(sr * 0.3)
    for i in range(fade):
        t = i / fade
        buf[i] *= t; buf[n - 1 - i] *= t
    return buf


class Audio:
    """SFX + ambient loop; silent if the mixer can't start"""

    def __init__(self, enabled=True):
        self.on = enabled
        self.sfx_vol = 0.6
        self.bgm_vol = 0.35
        self.sounds = {}
        self.bgm_sound = None
        self.bgm_chan = None
        if not enabled: return
        try:
            pygame.mixer.init(SR, -16, 1, 1024)
            self.sounds = {
                "click": pygame.mixer.Sound(_wav(tone(660, 0.06, 0.28))),
                "catch": pygame.mixer.Sound(_wav(chirp(900, 2400, 0.16, 0.35))),
                "map":   pygame.mixer.Sound(_wav(swoosh(0.35))),
                "rustle": pygame.mixer.Sound(_wav(swoosh(0.12, 0.08))),
            }
        except Exception as e:
            print(f"[Audio init] {e}")
            return
        self._init_bgm()

    def _init_bgm(self):
        try:
            self.bgm_sound = pygame.mixer.Sound(_wav(ambient_loop()))
            self.bgm_sound.set_volume(self.bgm_vol)
            self.bgm_chan = self.bgm_sound.play(loops=-1, fade_ms=1500)
        except Exception as e:
            print(f"[BGM init] {e}")

    def toggle(self):
        self.on = not self.on
        if self.bgm_sound:
            self.bgm_sound.set_volume(self.bgm_vol if self.on else 0.0)
        return self.on

    def play(self, name):
        if not self.on: return
        s = self.sounds.get(name)
        if s:
            s.set_volume(self.sfx_vol)
            s.play()
