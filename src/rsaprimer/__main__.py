"""The Command Line Interface for the utility, including Interactive elements.

A hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface) that automagically generates the
INTERACTIVE part on-the-fly based on the missing components of the CLI interaction, including the option that none
are included. Running it without arguments walks through the full demonstration: pick two primes, save the key
pair, encode a number and decode it again.

Typical usage example:

    rsaprimer
    OR
    python -m rsaprimer demo -p 61 -q 53 --message 65
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import pathlib
import sys
import typing

import rsaprimer


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Type = str
    choices: list[str] | None = None
    default: typing.Any = None
    advanced: bool = False


help_dict: dict[str, HelpData] = {
    "subcommand":
        HelpData(
            description="The available subcommands in RSA Primer.",
            choices=["demo", "keygen", "encode", "decode"],
            default="demo",
        ),
    "demo":
        HelpData("Full walkthrough: key generation, encoding and decoding of one number."),
    "keygen":
        HelpData("Key pair generation from two primes."),
    "encode":
        HelpData("Encoding of a number with a public key."),
    "decode":
        HelpData("Decoding of a number with a key pair."),
    "p":
        HelpData(
            description="The first prime number.",
            format=int,
        ),
    "q":
        HelpData(
            description="The second prime number, distinct from the first.",
            format=int,
        ),
    "public_key":
        HelpData(
            description="Location of the public key file.",
            format=pathlib.Path,
            default=pathlib.Path("publickey.txt"),
        ),
    "private_key":
        HelpData(
            description="Location of the private key file.",
            format=pathlib.Path,
            default=pathlib.Path("privatekey.txt"),
        ),
    "message":
        HelpData(
            description="The number to encode. Must be greater than 0 and smaller than the modulus n.",
            format=int,
        ),
    "ciphertext":
        HelpData(
            description="The encoded number to decode.",
            format=int,
        ),
    "format":
        HelpData(
            description="Key file format.",
            choices=["text", "pem"],
            advanced=True,
            default="text",
        ),
    "text":
        HelpData("One labeled integer per line."),
    "pem":
        HelpData("PKCS1 PEM."),
    "overwrite":
        HelpData(
            description="Overwrite specified destination files if they exist?",
            choices=["Y", "N"],
            default="N",
        )
}

needs = {
    "demo": ("p", "q", "public_key", "private_key", "format"),
    "keygen": ("p", "q", "public_key", "private_key", "format"),
    "encode": ("public_key", "message", "format"),
    "decode": ("public_key", "private_key", "ciphertext", "format"),
}

primes = argparse.ArgumentParser(add_help=False)
primes.add_argument("-p", type=help_dict["p"].format, help=help_dict["p"].description)
primes.add_argument("-q", type=help_dict["q"].format, help=help_dict["q"].description)
pubkey = argparse.ArgumentParser(add_help=False)
pubkey.add_argument("--public_key", "-k", type=help_dict["public_key"].format, help=help_dict["public_key"].description)
privkey = argparse.ArgumentParser(add_help=False)
privkey.add_argument("--private_key",
                     "-K",
                     type=help_dict["private_key"].format,
                     help=help_dict["private_key"].description)
payloads = argparse.ArgumentParser(add_help=False)
payloads.add_argument("--message", "-m", type=help_dict["message"].format, help=help_dict["message"].description)
fmt = argparse.ArgumentParser(add_help=False)
fmt.add_argument("--format", "-f", choices=help_dict["format"].choices, help=help_dict["format"].description)
overwrite = argparse.ArgumentParser(add_help=False)
overwrite.add_argument("--overwrite", "-o", action="store_const", const="Y", help=help_dict["overwrite"].description)
corep = argparse.ArgumentParser(prog="rsaprimer")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {rsaprimer.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
corep.add_argument("--advanced", "-a", action="store_true", help="Enable advanced mode, for interactive mode")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")

demo = commands.add_parser("demo",
                           parents=[primes, pubkey, privkey, payloads, fmt, overwrite],
                           help=help_dict["demo"].description)
keygen = commands.add_parser("keygen",
                             parents=[primes, pubkey, privkey, fmt, overwrite],
                             help=help_dict["keygen"].description)
encode = commands.add_parser("encode", parents=[pubkey, payloads, fmt], help=help_dict["encode"].description)
decode = commands.add_parser("decode", parents=[pubkey, privkey, fmt], help=help_dict["decode"].description)
decode.add_argument("--ciphertext",
                    "-c",
                    type=help_dict["ciphertext"].format,
                    help=help_dict["ciphertext"].description)


def checkmodes(arg: str, mode: tuple[bool, bool]):
    helper_data = help_dict[arg]
    if (mode[0] or (helper_data.advanced and not mode[1])) and helper_data.default:
        return helper_data.default
    if mode[0]:
        raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    return helper_data


def choice_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    choices = helper_data.choices
    vald = set(choices)
    for choice in choices:
        defstring = " (Default)" if choice == helper_data.default else ""
        if help_dict.get(choice, None):
            prntr(f"{choice} - {help_dict[choice].description}" + defstring)
        else:
            prntr(f"{choice}" + defstring)
    if helper_data.default is not None:
        prntr("To accept default just click enter. Otherwise specify value.")
    while True:
        ch = input(f"{arg}: ")
        if ch in vald:
            return ch
        if not ch and helper_data.default is not None:
            return helper_data.default
        prntr("Please select an option from the list.")


def input_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    if helper_data.default is not None:
        prntr(f"Default value: {helper_data.default}")
        prntr("To accept default just click enter. Otherwise specify value.")
    cls = helper_data.format
    while True:
        ch = input(f"{arg}: ")
        if not ch and helper_data.default is not None:
            return helper_data.default
        if ch == "":
            prntr("Please provide a value.")
            continue
        try:
            return cls(ch)
        except ValueError:
            prntr(f"We could not convert your value to {cls.__name__}.")


def gather(args: argparse.Namespace, reqs: typing.Iterable[str], mode: tuple[bool, bool],
           prntr: typing.Callable = print) -> None:
    """Fill every missing requirement of `args`, prompting where needed."""
    for req in reqs:
        if getattr(args, req, None) is None:
            if help_dict[req].choices is not None:
                res = choice_handler(req, mode, prntr)
            else:
                res = input_handler(req, mode, prntr)
            setattr(args, req, res)
        else:
            prntr(f"{req}: {getattr(args, req)}")


def load_public(file: pathlib.Path, form: str) -> rsaprimer.PublicKey:
    if form == "pem":
        return rsaprimer.import_public_pem(file)
    return rsaprimer.load_public_key(file)


def load_private(file: pathlib.Path, form: str) -> rsaprimer.PrivateKey:
    if form == "pem":
        return rsaprimer.import_private_pem(file)[1]
    return rsaprimer.load_private_key(file)


def save_pair(args: argparse.Namespace, pub: rsaprimer.PublicKey, priv: rsaprimer.PrivateKey) -> None:
    if args.format == "pem":
        rsaprimer.export_public_pem(args.public_key, pub)
        rsaprimer.export_private_pem(args.private_key, pub, priv)
    else:
        rsaprimer.save_key(args.public_key, pub)
        rsaprimer.save_key(args.private_key, priv)


def may_write(args: argparse.Namespace, mode: tuple[bool, bool], prntr: typing.Callable = print) -> bool:
    """Check whether the destination key files may be written."""
    if not args.private_key.exists() and not args.public_key.exists():
        return True
    rs = getattr(args, "overwrite", None)
    if rs is None:
        rs = choice_handler("overwrite", mode, prntr)
    return rs == "Y"


def execute(args: argparse.Namespace, mode: tuple[bool, bool], pspr: typing.Callable) -> int:
    """Run the selected subcommand on complete arguments. Returns the exit status."""
    match args.subcommand:
        case "demo" | "keygen":
            if not may_write(args, mode, pspr):
                print("Destination private or public key already exists!")
                return 1
            pub, priv = rsaprimer.generate_key_pair(args.p, args.q)
            save_pair(args, pub, priv)
            print(f"Public key saved to: {args.public_key}")
            print(f"Private key saved to: {args.private_key}")
            if args.subcommand == "keygen":
                pspr("\nKey pair generated!")
                return 0
            gather(args, ("message",), mode, pspr)
            c = rsaprimer.encode(pub, args.message)
            print(f"Encoded number c: {c}")
            m = rsaprimer.decode(pub, priv, c)
            print(f"Decoded number m: {m}")
            if m != args.message:
                print("Encoding/Decoding failed.")
                return 1
            print("Encoding/Decoding successful!")
        case "encode":
            pub = load_public(args.public_key, args.format)
            pspr("Encoded number:")
            print(rsaprimer.encode(pub, args.message))
        case "decode":
            pub = load_public(args.public_key, args.format)
            priv = load_private(args.private_key, args.format)
            pspr("Decoded number:")
            print(rsaprimer.decode(pub, priv, args.ciphertext))
    return 0


def main():
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args()
    pstatus = (args.non_interactive, args.advanced)

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not pstatus[0]:
            print(text)

    pspr("Welcome to RSA Primer!\n")
    try:
        if not args.subcommand:
            args.subcommand = choice_handler("subcommand", pstatus, pspr)
        gather(args, needs[args.subcommand], pstatus, pspr)
        pspr("\nInput Complete! Executing...")
        status = execute(args, pstatus, pspr)
    except (rsaprimer.RSAPrimerError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    if status:
        sys.exit(status)
    pspr("Thank you for using RSA Primer!")
    pspr("Goodbye!")


if __name__ == "__main__":
    main()
