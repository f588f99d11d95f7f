#!/usr/bin/env python3
"""
Redefinir a senha de um usuario existente.

Uso:
  python scripts/reset_password.py --email maria@exemplo.com [--password 'Nova@Senha1']

Sem --password, gera uma senha aleatoria que atende a politica e a imprime.
"""
from __future__ import annotations

import argparse
import secrets
import string
import sys

from pydantic import ValidationError

from backoffice.core.security import hash_password
from backoffice.repositories.sql_repository import SQLRepository
from backoffice.schemas.authentication import SignUpBody


def gen_password(length: int = 16) -> str:
    alphabet = string.ascii_letters + string.digits
    body = [secrets.choice(alphabet) for _ in range(length - 3)]
    body += [secrets.choice(string.ascii_uppercase), secrets.choice(string.digits), secrets.choice("!@#$%&*")]
    secrets.SystemRandom().shuffle(body)
    return "".join(body)


def main() -> None:
    ap = argparse.ArgumentParser(description="Redefinir senha de usuario")
    ap.add_argument("--email", required=True, help="Email do usuario")
    ap.add_argument("--password", help="Nova senha (default: aleatoria)")
    args = ap.parse_args()

    password = (args.password or "").strip() or gen_password()
    try:
        payload = SignUpBody(name="-", email=args.email, password=password)
    except ValidationError as exc:
        messages = "; ".join(str(err["msg"]).removeprefix("Value error, ") for err in exc.errors())
        raise SystemExit(f"Dados invalidos: {messages}")

    repo = SQLRepository()
    if not repo.update_user_password(payload.email, hash_password(payload.password)):
        raise SystemExit(f"Usuario '{payload.email}' nao encontrado")

    print("OK: senha redefinida")
    print(f"  Email: {payload.email}")
    if not args.password:
        print(f"  Nova senha: {password}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
