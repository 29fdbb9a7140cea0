import logging
import sys

import easy_request

logging.basicConfig(level="DEBUG")

base_url = sys.argv[1] if len(sys.argv) > 1 else "https://httpbin.org"

client = easy_request.setup(headers={"X-Service-Name": "example"})

with easy_request.use_client(client):
    response = easy_request.get(f"{base_url}/get", easy_request.with_params({"a": ["b", "c"]}))
    print(response.status, response.json()["args"])

    response = easy_request.post(f"{base_url}/post", easy_request.with_json({"name": "value"}))
    print(response.status, response.json()["json"])

    response = easy_request.get(f"{base_url}/absolute-redirect/5", easy_request.with_redirects(2))
    print(response.status, response.headers[easy_request.Header.LOCATION])

    with easy_request.get(f"{base_url}/stream-bytes/1024", easy_request.with_stream()) as response:
        print(response.status, sum(len(chunk) for chunk in response.body.iter_bytes()))
