"""
Basic usage - Login and show account details
"""
import os
from rapidshare import RapidshareClient


def main():
    # Login with premium account credentials (the cookie is fetched for you)
    with RapidshareClient(
        login=os.environ.get("RAPIDSHARE_LOGIN", "my_login"),
        password=os.environ.get("RAPIDSHARE_PASSWORD", "my_password")
    ) as rs:
        print(f"Cookie: {rs.cookie}")
        print(rs.get_account_info())


if __name__ == "__main__":
    main()
