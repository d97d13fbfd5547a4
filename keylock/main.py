"""
KeyLock - Command Line Entry Point

Thin argparse front end over the codec engines. Each sub-command prints the
success value, or "Error: <message>" on stderr with exit status 1. With
--json the result is printed as a JSON object on stdout instead.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .asn1.der_public_key import RSADataEncoding, RSADEREncoding, RSADERPublicKeyEngine
from .check_digit.check_digit import CheckDigitEngine, CheckDigitMethod
from .encoding.base64_codec import Base64Engine
from .encoding.base94 import Base94Engine
from .encoding.bcd import BCDEngine, BCDFormat
from .encoding.hex_codec import DataEncoding
from .encoding.text_transforms import CharacterEncodingEngine, CharacterEncodingType
from .errors import CodecResult, capture
from .message.hex_dump import MessageParserEngine, ParseMode


LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _names(enum_cls) -> List[str]:
    return [member.name for member in enum_cls]


def _emit(args, result: CodecResult) -> int:
    if args.json:
        print(json.dumps(result.to_dict()))
        return 0 if result.success else 1
    if not result.success:
        print(f"Error: {result.message}", file=sys.stderr)
        return 1
    print(result.value)
    return 0


def cmd_hex_dump(args) -> int:
    return _emit(args, MessageParserEngine.parse(args.input, ParseMode[args.mode]))


def cmd_convert(args) -> int:
    return _emit(args, CharacterEncodingEngine.convert(CharacterEncodingType[args.type], args.input))


def cmd_bcd(args) -> int:
    bcd_format = BCDFormat[args.format]
    if args.action == 'encode':
        return _emit(args, BCDEngine.encode(args.input, bcd_format))
    return _emit(args, BCDEngine.decode(args.input, bcd_format))


def _base_command(engine, args) -> int:
    encoding = DataEncoding.HEXADECIMAL if args.hex else DataEncoding.ASCII
    if args.action == 'encode':
        return _emit(args, engine.encode(args.input, encoding))
    return _emit(args, engine.decode(args.input, encoding))


def cmd_base94(args) -> int:
    return _base_command(Base94Engine, args)


def cmd_base64(args) -> int:
    return _base_command(Base64Engine, args)


def cmd_check_digit(args) -> int:
    method = CheckDigitMethod[args.method]
    if args.action == 'generate':
        return _emit(args, CheckDigitEngine.generate(args.input, method))
    return _emit(args, CheckDigitEngine.check(args.input, method))


def cmd_der_encode(args) -> int:
    return _emit(args, RSADERPublicKeyEngine.encode(
        args.modulus,
        RSADataEncoding[args.modulus_encoding],
        args.exponent,
        RSADataEncoding[args.exponent_encoding],
        modulus_negative=args.negative,
        der_encoding=RSADEREncoding[args.der_encoding],
    ))


def cmd_der_decode(args) -> int:
    result = RSADERPublicKeyEngine.decode(
        args.input,
        RSADataEncoding[args.encoding],
        RSADEREncoding[args.der_encoding],
    )
    if not result.success:
        return _emit(args, result)
    key = result.value
    if args.json:
        fields = {
            'modulus': key.modulus_hex,
            'exponent': key.exponent_hex,
            'modulus_negative': key.modulus_negative,
        }
        if args.pem:
            pem = capture("der.pem", key.to_pem)
            if not pem.success:
                return _emit(args, pem)
            fields['pem'] = pem.value
        return _emit(args, CodecResult.ok(fields))
    print(f"Modulus:          {key.modulus_hex}")
    print(f"Exponent:         {key.exponent_hex}")
    print(f"Modulus negative: {key.modulus_negative}")
    if args.pem:
        pem = capture("der.pem", key.to_pem)
        if not pem.success:
            return _emit(args, pem)
        print(pem.value, end='')
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="keylock", description="KeyLock encoding toolkit")
    p.add_argument('-v', '--verbose', action='store_true', help="Enable debug logging")
    p.add_argument('--json', action='store_true', help="Print the result as a JSON object")
    sub = p.add_subparsers(dest='cmd', required=True)

    # hex dump
    d = sub.add_parser('hex-dump', help="Hex message to hex dump")
    d.add_argument('input', help="Hex data")
    d.add_argument('--mode', choices=_names(ParseMode), default=ParseMode.ISO_8583_1987.name)
    d.set_defaults(func=cmd_hex_dump)

    # character encodings
    c = sub.add_parser('convert', help="ASCII / EBCDIC / ATM decimal / hex conversions")
    c.add_argument('type', choices=_names(CharacterEncodingType))
    c.add_argument('input')
    c.set_defaults(func=cmd_convert)

    # bcd
    b = sub.add_parser('bcd', help="Binary Coded Decimal")
    b.add_argument('action', choices=['encode', 'decode'])
    b.add_argument('input')
    b.add_argument('--format', choices=_names(BCDFormat), default=BCDFormat.BINARY.name)
    b.set_defaults(func=cmd_bcd)

    # base94 / base64
    for name, func in (('base94', cmd_base94), ('base64', cmd_base64)):
        e = sub.add_parser(name, help=f"{name.capitalize()} encode/decode")
        e.add_argument('action', choices=['encode', 'decode'])
        e.add_argument('input')
        e.add_argument('--hex', action='store_true', help="Input (encode) or output (decode) as hex")
        e.set_defaults(func=func)

    # check digits
    k = sub.add_parser('check-digit', help="Luhn / Amex SE check digits")
    k.add_argument('action', choices=['generate', 'check'])
    k.add_argument('input')
    k.add_argument('--method', choices=_names(CheckDigitMethod), default=CheckDigitMethod.LUHN.name)
    k.set_defaults(func=cmd_check_digit)

    # der
    de = sub.add_parser('der-encode', help="Modulus + exponent to DER public key hex")
    de.add_argument('modulus')
    de.add_argument('exponent')
    de.add_argument('--modulus-encoding', choices=_names(RSADataEncoding),
                    default=RSADataEncoding.ASCII_HEX.name)
    de.add_argument('--exponent-encoding', choices=_names(RSADataEncoding),
                    default=RSADataEncoding.ASCII_HEX.name)
    de.add_argument('--negative', action='store_true', help="Negate the modulus")
    de.add_argument('--der-encoding', choices=_names(RSADEREncoding),
                    default=RSADEREncoding.UNKNOWN.name)
    de.set_defaults(func=cmd_der_encode)

    dd = sub.add_parser('der-decode', help="DER public key to modulus + exponent")
    dd.add_argument('input')
    dd.add_argument('--encoding', choices=_names(RSADataEncoding),
                    default=RSADataEncoding.ASCII_HEX.name)
    dd.add_argument('--der-encoding', choices=_names(RSADEREncoding),
                    default=RSADEREncoding.UNKNOWN.name)
    dd.add_argument('--pem', action='store_true', help="Also print a SubjectPublicKeyInfo PEM")
    dd.set_defaults(func=cmd_der_decode)

    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
