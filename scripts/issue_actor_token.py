"""Utility script to mint a bearer token for a user during development."""

from __future__ import annotations

import argparse
from datetime import timedelta

from notification_hub.domain.entities import Actor
from notification_hub.infrastructure.security import create_actor_token


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for token creation."""

    parser = argparse.ArgumentParser(
        description="Issue an access token for the Notification Hub API.",
    )
    parser.add_argument("user_id", type=int, help="Identificador del usuario")
    parser.add_argument("--first-name", default="", help="Nombre del usuario")
    parser.add_argument("--last-name", default="", help="Apellido del usuario")
    parser.add_argument("--avatar", default=None, help="URL del avatar (opcional)")
    parser.add_argument(
        "--public-url", default=None, help="URL del perfil público (opcional)"
    )
    parser.add_argument(
        "--expires-minutes",
        type=int,
        default=None,
        help="Minutos de validez. Por defecto se usa ACCESS_TOKEN_EXPIRE_MINUTES.",
    )
    return parser.parse_args()


def main() -> None:
    """Print a token for the actor described by the command line arguments."""

    args = parse_args()
    if args.expires_minutes is not None and args.expires_minutes <= 0:
        raise SystemExit("La validez del token debe ser mayor que cero.")

    actor = Actor(
        id=args.user_id,
        first_name=args.first_name,
        last_name=args.last_name,
        avatar=args.avatar,
        public_url=args.public_url,
    )
    expires = (
        timedelta(minutes=args.expires_minutes)
        if args.expires_minutes is not None
        else None
    )
    print(create_actor_token(actor, expires))


if __name__ == "__main__":
    main()
