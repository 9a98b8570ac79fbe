# echo_client.py
# Run echo_server.py first.
import httpx

from lightrpc import Client, ClientSettings, Request

RPC_URL = "http://127.0.0.1:8001/jsonrpc"


def main():
    with Client(RPC_URL, settings=ClientSettings.from_env(log_level="DEBUG")) as client:
        # default method "call", id 0
        response = client.call("hello", {"name": "rafay"})
        print("result:", response.result())

        response = client.send(Request(10, 2).set_method("divide").set_id(1))
        print("10 / 2 =", response.result())

        response = client.send(Request(5, 0).set_method("divide").set_id(2))
        if response.is_error():
            print("error:", response.error())

        # the raw body, not only the result/error part
        print("envelope:", response.to_json())


if __name__ == "__main__":
    try:
        main()
    except httpx.ConnectError as e:
        print(f"Is echo_server.py running? {e}")
