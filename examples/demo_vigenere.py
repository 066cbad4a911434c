"""
vigenere_crypto — Live Demo
===========================
Run:  python examples/demo_vigenere.py

Walks through the key stream, encryption, decryption, verification and
the two non-letter policies, printing each step.
"""

import sys, os, time
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from vigenere_crypto        import VigenereCipher, InvalidKeyError
from vigenere_crypto.caesar import shift

LINE = "═" * 70
MSG  = "Attack at dawn, hold the bridge."

def header(step, name):
    print(f"\n{LINE}")
    print(f"  Step {step} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

# ─────────────────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  vigenere_crypto — Vigenère Demo")
print("  Apache 2.0")
print(LINE)
print(f"  Message: {MSG}\n")

# ── STEP 1 ───────────────────────────────────────────────────────────────────
header(1, "SHIFT — one letter, one offset")
ok("shift('A', 11)",               shift("A", 11))
ok("shift('L', 11, decrypt=True)", shift("L", 11, decrypt=True))

# ── STEP 2 ───────────────────────────────────────────────────────────────────
header(2, "KEY STREAM — LEMON repeated to message length")
v = VigenereCipher("lemon")
ok("Normalized key", v.key)
ok("Fingerprint",    v.fingerprint)
ok("Key stream",     v.keystream(len(MSG)))

# ── STEP 3 ───────────────────────────────────────────────────────────────────
header(3, "ENCRYPT / DECRYPT — non-letters pass through")
t0 = time.perf_counter()
ct = v.encrypt(MSG)
pt = v.decrypt(ct)
elapsed = time.perf_counter() - t0
ok("Encrypted",  ct)
ok("Decrypted",  pt)
ok("Round-trip", f"{elapsed*1000:.3f} ms")

# ── STEP 4 ───────────────────────────────────────────────────────────────────
header(4, "VERIFY — does the ciphertext decrypt to the claim?")
ok("Claim 'attack at dawn, hold the bridge.'", str(v.is_encrypted(ct, MSG)))
ok("Claim 'retreat at dusk, burn the bridge'", str(v.is_encrypted(ct, "retreat at dusk, burn the bridge")))

# ── STEP 5 ───────────────────────────────────────────────────────────────────
header(5, "LETTER-ONLY — every character forced into A-Z")
strict = VigenereCipher("LEMON", preserve_non_alpha=False)
ok("Encrypted", strict.encrypt(MSG))
ok("Decrypted", strict.decrypt(strict.encrypt(MSG)) + "  (punctuation lost)")

# ── STEP 6 ───────────────────────────────────────────────────────────────────
header(6, "EMPTY KEY — rejected")
try:
    VigenereCipher("")
except InvalidKeyError as e:
    ok("InvalidKeyError", str(e))

print(f"\n{LINE}")
print("  Not secure: frequency analysis breaks this in minutes.")
print(LINE + "\n")
