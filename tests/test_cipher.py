import base64
import binascii
import json
import unittest

from aestext import (
    AES,
    BlockLengthError,
    BlockUnpaddingError,
    IVLengthError,
    KeySizeError,
    Mode,
    Options,
    Output,
    Padding,
    UnknownModeError,
    UnknownOutputError,
    UnknownPaddingError,
    new,
    new_options,
)
from aestext.common.utils import b64e
from aestext.crypto.block import new_cipher
from aestext.crypto.ecb import ECBMode


KEY_256 = b"12345678123456781234567812345678"
KEY_128 = b"1234567812345678"
IV = b"1234567812345678"

PAYLOAD = json.dumps({
    "id": 1024,
    "name": "Ada Lovelace",
    "email": "ada@example.com",
    "tags": ["math", "engines"],
    "note": "café ☃",
})


class TestKnownVectors(unittest.TestCase):
    def setUp(self):
        self.tool = new(Options(
            mode=Mode.CBC,
            padding=Padding.PKCS7,
            output=Output.BASE64,
            key=KEY_256,
            iv=IV,
        ))

    def test_encrypt(self):
        self.assertEqual(self.tool.encrypt("this is content"), "pe4jT1kBKVWAiVoiv+XFbw==")

    def test_decrypt(self):
        self.assertEqual(self.tool.decrypt("pe4jT1kBKVWAiVoiv+XFbw=="), "this is content")

    def test_new_options_defaults_match(self):
        opts = new_options(KEY_256, IV)
        self.assertEqual(opts.mode, Mode.CBC)
        self.assertEqual(opts.padding, Padding.PKCS7)
        self.assertEqual(opts.output, Output.BASE64)
        self.assertEqual(AES(opts).encrypt("this is content"), "pe4jT1kBKVWAiVoiv+XFbw==")

    def test_pkcs5_same_as_pkcs7(self):
        pkcs5 = new(Options(mode=Mode.CBC, padding=Padding.PKCS5, key=KEY_256, iv=IV))
        self.assertEqual(pkcs5.encrypt("this is content"), "pe4jT1kBKVWAiVoiv+XFbw==")

    def test_hex_output_is_lowercase_hex_of_same_bytes(self):
        tool = new(Options(mode=Mode.CBC, output=Output.HEX, key=KEY_256, iv=IV))
        expected = base64.b64decode("pe4jT1kBKVWAiVoiv+XFbw==").hex()
        out = tool.encrypt("this is content")
        self.assertEqual(out, expected)
        self.assertEqual(out, out.lower())
        self.assertEqual(tool.decrypt(out), "this is content")


class TestRoundTrip(unittest.TestCase):
    def test_all_modes(self):
        for mode in Mode:
            for output in Output:
                with self.subTest(mode=mode.name, output=output.name):
                    tool = new(Options(mode=mode, output=output, key=KEY_128, iv=IV))
                    self.assertEqual(tool.decrypt(tool.encrypt(PAYLOAD)), PAYLOAD)

    def test_key_sizes(self):
        for key in (KEY_128, KEY_256[:24], KEY_256):
            with self.subTest(size=len(key)):
                tool = new(new_options(key, IV))
                self.assertEqual(tool.decrypt(tool.encrypt(PAYLOAD)), PAYLOAD)

    def test_empty_and_aligned_plaintext(self):
        for mode in Mode:
            tool = new(Options(mode=mode, key=KEY_128, iv=IV))
            for text in ("", "0123456789abcdef", "0123456789abcdef" * 3):
                with self.subTest(mode=mode.name, length=len(text)):
                    ct = base64.b64decode(tool.encrypt(text))
                    self.assertEqual(len(ct), len(text) + 16)
                    self.assertEqual(tool.decrypt(tool.encrypt(text)), text)

    def test_line_wrapped_base64_decrypts(self):
        tool = new(Options(mode=Mode.CBC, key=KEY_128, iv=IV))
        ct = tool.encrypt(PAYLOAD)
        self.assertGreater(len(ct), 80)
        self.assertEqual(tool.decrypt(ct[:40] + "\n" + ct[40:]), PAYLOAD)
        self.assertEqual(tool.decrypt(ct[:40] + "\r\n" + ct[40:76] + "\n" + ct[76:]), PAYLOAD)
        self.assertEqual(tool.try_decrypt(ct[:40] + "\n" + ct[40:]), (PAYLOAD, None))

    def test_deterministic(self):
        for mode in Mode:
            with self.subTest(mode=mode.name):
                a = new(Options(mode=mode, key=KEY_128, iv=IV))
                b = new(Options(mode=mode, key=KEY_128, iv=IV))
                self.assertEqual(a.encrypt(PAYLOAD), a.encrypt(PAYLOAD))
                self.assertEqual(a.encrypt(PAYLOAD), b.encrypt(PAYLOAD))

    def test_modes_produce_different_ciphertext(self):
        outputs = {
            new(Options(mode=mode, key=KEY_128, iv=IV)).encrypt(PAYLOAD)
            for mode in Mode
        }
        self.assertEqual(len(outputs), len(Mode))


class TestECBBehaviour(unittest.TestCase):
    def test_identical_blocks_encrypt_identically(self):
        tool = new(Options(mode=Mode.ECB, output=Output.HEX, key=KEY_128))
        ct = bytes.fromhex(tool.encrypt("A" * 32))
        self.assertEqual(ct[0:16], ct[16:32])

    def test_cbc_chains_identical_blocks(self):
        tool = new(Options(mode=Mode.CBC, output=Output.HEX, key=KEY_128, iv=IV))
        ct = bytes.fromhex(tool.encrypt("A" * 32))
        self.assertNotEqual(ct[0:16], ct[16:32])

    def test_iv_is_ignored(self):
        no_iv = new(Options(mode=Mode.ECB, key=KEY_128))
        with_iv = new(Options(mode=Mode.ECB, key=KEY_128, iv=IV))
        short_iv = new(Options(mode=Mode.ECB, key=KEY_128, iv=b"abc"))
        self.assertEqual(no_iv.encrypt(PAYLOAD), with_iv.encrypt(PAYLOAD))
        self.assertEqual(no_iv.encrypt(PAYLOAD), short_iv.encrypt(PAYLOAD))


class TestErrors(unittest.TestCase):
    def test_unknown_mode(self):
        tool = new(Options(mode=9, key=KEY_128, iv=IV))
        with self.assertRaises(UnknownModeError):
            tool.encrypt("x")
        with self.assertRaises(UnknownModeError):
            tool.decrypt(b64e(bytes(16)))

    def test_unknown_padding(self):
        tool = new(Options(padding=5, key=KEY_128, iv=IV))
        with self.assertRaises(UnknownPaddingError):
            tool.encrypt("x")

    def test_unknown_output(self):
        tool = new(Options(output=3, key=KEY_128, iv=IV))
        with self.assertRaises(UnknownOutputError):
            tool.encrypt("x")
        with self.assertRaises(UnknownOutputError):
            tool.decrypt("AAAA")

    def test_bad_key_size(self):
        for key in (b"", b"short", KEY_128 + b"x", KEY_256 * 2):
            with self.subTest(size=len(key)):
                with self.assertRaises(KeySizeError):
                    new(new_options(key, IV)).encrypt("x")
                with self.assertRaises(KeySizeError):
                    new(new_options(key, IV)).decrypt("pe4jT1kBKVWAiVoiv+XFbw==")

    def test_bad_iv_length(self):
        for mode in (Mode.CBC, Mode.CTR, Mode.OFB, Mode.CFB):
            with self.subTest(mode=mode.name):
                with self.assertRaises(IVLengthError):
                    new(Options(mode=mode, key=KEY_128, iv=b"short")).encrypt("x")

    def test_misaligned_ciphertext(self):
        for mode in Mode:
            with self.subTest(mode=mode.name):
                tool = new(Options(mode=mode, key=KEY_128, iv=IV))
                with self.assertRaises(BlockLengthError):
                    tool.decrypt(b64e(bytes(15)))

    def test_bad_pad_byte(self):
        block = b"fifteen bytes..\x20"
        ct = ECBMode(new_cipher(KEY_128)).encrypt(block)
        tool = new(Options(mode=Mode.ECB, key=KEY_128))
        with self.assertRaises(BlockUnpaddingError):
            tool.decrypt(b64e(ct))

    def test_malformed_text_propagates_decoder_error(self):
        b64_tool = new(Options(output=Output.BASE64, key=KEY_128, iv=IV))
        hex_tool = new(Options(output=Output.HEX, key=KEY_128, iv=IV))
        with self.assertRaises(binascii.Error):
            b64_tool.decrypt("not base64!!")
        with self.assertRaises(binascii.Error):
            hex_tool.decrypt("abc")
        with self.assertRaises(binascii.Error):
            hex_tool.decrypt("zz" * 16)


class TestStatusWrappers(unittest.TestCase):
    def test_success(self):
        tool = new(new_options(KEY_256, IV))
        self.assertEqual(tool.try_encrypt("this is content"), ("pe4jT1kBKVWAiVoiv+XFbw==", None))
        self.assertEqual(tool.try_decrypt("pe4jT1kBKVWAiVoiv+XFbw=="), ("this is content", None))

    def test_cipher_error(self):
        result, error = new(Options(mode=42, key=KEY_128, iv=IV)).try_encrypt("x")
        self.assertEqual(result, "")
        self.assertIsInstance(error, UnknownModeError)
        self.assertEqual(str(error), "unknown mode")

    def test_decoder_error(self):
        result, error = new(new_options(KEY_128, IV)).try_decrypt("@@@@")
        self.assertEqual(result, "")
        self.assertIsInstance(error, binascii.Error)

    def test_block_length_error(self):
        result, error = new(new_options(KEY_128, IV)).try_decrypt(b64e(bytes(20)))
        self.assertEqual(result, "")
        self.assertIsInstance(error, BlockLengthError)

    def test_bad_pad_byte_error(self):
        ct = ECBMode(new_cipher(KEY_128)).encrypt(b"fifteen bytes..\x20")
        result, error = new(Options(mode=Mode.ECB, key=KEY_128)).try_decrypt(b64e(ct))
        self.assertEqual(result, "")
        self.assertIsInstance(error, BlockUnpaddingError)


if __name__ == "__main__":
    unittest.main()
