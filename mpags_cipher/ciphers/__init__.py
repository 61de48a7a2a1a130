from .base      import Cipher, CipherMode
from .caesar    import CaesarCipher
from .vigenere  import VigenereCipher
from .playfair  import PlayfairCipher

__all__ = [
    "Cipher",
    "CipherMode",
    "CaesarCipher",
    "VigenereCipher",
    "PlayfairCipher",
]
