"""Tests for the command-line entry point."""

import json

import httpx
import pytest

from ultraswap.cli import build_parser, run
from ultraswap.client.factory import create_ultra_service

from samples import SOL_MINT, USDC_MINT


@pytest.fixture
def service_for(make_transport):
    """Service whose requests are answered by ``handler``."""

    def factory(handler=None, **kwargs):
        transport = make_transport(handler, **kwargs)
        return create_ultra_service(transport=transport), transport

    return factory


class TestQuoteCommand:
    """Tests for `ultraswap quote`."""

    @pytest.mark.asyncio
    async def test_ui_amount_converted(self, service_for, quote_body, capsys):
        service, transport = service_for(body=quote_body)
        args = build_parser().parse_args(
            [
                "quote",
                "--input-mint", SOL_MINT,
                "--output-mint", USDC_MINT,
                "--ui-amount", "1.5",
                "--input-decimals", "9",
            ]
        )

        assert await run(args, service=service) == 0

        assert transport.requests[0].url.params["amount"] == "1500000000"
        printed = json.loads(capsys.readouterr().out)
        assert printed["requestId"] == quote_body["requestId"]
        assert printed["routePlan"][0]["swapInfo"]["feeAmount"] == "5000"

    @pytest.mark.asyncio
    async def test_summary(self, service_for, quote_body, routers_body, capsys):
        def handler(request):
            if request.url.path == "/order/routers":
                return httpx.Response(200, json=routers_body)
            return httpx.Response(200, json=quote_body)

        service, _ = service_for(handler)
        args = build_parser().parse_args(
            [
                "quote",
                "--input-mint", SOL_MINT,
                "--output-mint", USDC_MINT,
                "--amount", "1000000000",
                "--input-decimals", "9",
                "--output-decimals", "6",
                "--input-symbol", "SOL",
                "--output-symbol", "USDC",
                "--summary",
            ]
        )

        assert await run(args, service=service) == 0

        out = capsys.readouterr().out
        assert "1 SOL ≈ 150.25 USDC" in out
        assert "-1.50%" in out
        assert "Metis" in out
        assert quote_body["requestId"] in out

    @pytest.mark.asyncio
    async def test_upstream_error_exit_code(self, service_for):
        service, _ = service_for(status_code=500, body="boom")
        args = build_parser().parse_args(
            ["quote", "--input-mint", SOL_MINT, "--output-mint", USDC_MINT, "--amount", "1"]
        )

        assert await run(args, service=service) == 1

    @pytest.mark.asyncio
    async def test_invalid_amount_exit_code(self, service_for):
        service, transport = service_for(body={})
        args = build_parser().parse_args(
            ["quote", "--input-mint", SOL_MINT, "--output-mint", USDC_MINT, "--amount", "1.5"]
        )

        assert await run(args, service=service) == 1
        assert transport.requests == []


class TestOtherCommands:
    """Tests for routers, balances, shield and execute commands."""

    @pytest.mark.asyncio
    async def test_routers(self, service_for, routers_body, capsys):
        service, _ = service_for(body=routers_body)
        args = build_parser().parse_args(["routers"])

        assert await run(args, service=service) == 0
        assert json.loads(capsys.readouterr().out) == routers_body

    @pytest.mark.asyncio
    async def test_balances(self, service_for, capsys):
        body = {"SOL": {"amount": "1500000000", "uiAmount": 1.5, "slot": 7, "isFrozen": False}}
        service, transport = service_for(body=body)
        args = build_parser().parse_args(["balances", "addr"])

        assert await run(args, service=service) == 0
        assert transport.requests[0].url.path == "/balances/addr"
        assert json.loads(capsys.readouterr().out) == body

    @pytest.mark.asyncio
    async def test_shield(self, service_for, capsys):
        service, transport = service_for(body={"warnings": {}})
        args = build_parser().parse_args(["shield", "a", "b"])

        assert await run(args, service=service) == 0
        assert transport.requests[0].url.params["mints"] == "a,b"
        assert json.loads(capsys.readouterr().out) == {"warnings": {}}

    @pytest.mark.asyncio
    async def test_execute_from_file(self, service_for, tmp_path, capsys):
        tx_file = tmp_path / "tx.b64"
        tx_file.write_text("AQIDBA==\n")
        service, transport = service_for(
            body={"status": "Failed", "code": -1, "error": "Simulation failed"}
        )
        args = build_parser().parse_args(
            ["execute", "--request-id", "req-1", "--signed-transaction-file", str(tx_file)]
        )

        assert await run(args, service=service) == 0
        assert json.loads(transport.requests[0].content)["signedTransaction"] == "AQIDBA=="
        assert json.loads(capsys.readouterr().out)["status"] == "Failed"

    def test_execute_requires_transaction(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["execute", "--request-id", "req-1"])
