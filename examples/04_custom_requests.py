"""
Call any RapidShare service with the generic call() method
"""
import os
from datetime import datetime

from rapidshare import RapidshareClient, ResponseShape


def main():
    rs = RapidshareClient(os.environ.get("RAPIDSHARE_COOKIE", "8C699638B74EA5DA..."))

    print("Account details:")
    for key, value in rs.call("getaccountdetails", shape=ResponseShape.KEY_VALUE_MAP).items():
        print(f"  {key}: {value}")

    print("Transaction log:")
    for transaction in reversed(rs.call("getrapidtranslogs", shape="csv")):
        print(f"  {transaction[2]} rapids at {datetime.fromtimestamp(int(transaction[0]))}")

    rs.close()


if __name__ == "__main__":
    main()
