# nosec B101


from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from domain.exceptions.rates import ProviderError
from infrastructure.providers.coingecko import CoinGeckoProvider

ASSETS = ['bitcoin', 'ethereum', 'litecoin']
FIATS = ['usd', 'eur', 'gbp']


def make_client(payload) -> AsyncMock:
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_response = Mock()
    mock_response.json.return_value = payload
    mock_response.raise_for_status = Mock()
    mock_client.get.return_value = mock_response
    return mock_client


@pytest.mark.asyncio
async def test_fetch_rates_success_returns_snapshot():
    mock_client = make_client({
        'bitcoin': {'usd': 67012.5, 'eur': 61870, 'gbp': 52731.2},
        'ethereum': {'usd': 3120.4, 'eur': 2881.0, 'gbp': 2455.9},
        'litecoin': {'usd': 71.2, 'eur': 65.7, 'gbp': 56.1},
    })
    provider = CoinGeckoProvider(client=mock_client)

    rates = await provider.fetch_rates(ASSETS, FIATS)

    assert rates['bitcoin'] == {'usd': 67012.5, 'eur': 61870.0, 'gbp': 52731.2}
    assert rates['litecoin']['gbp'] == 56.1
    assert isinstance(rates['bitcoin']['eur'], float)

    mock_client.get.assert_called_once()
    call_args = mock_client.get.call_args
    assert call_args[0][0] == 'https://api.coingecko.com/api/v3/simple/price'
    assert call_args[1]['params'] == {
        'ids': 'bitcoin,ethereum,litecoin',
        'vs_currencies': 'usd,eur,gbp',
    }


@pytest.mark.asyncio
async def test_fetch_rates_uses_configured_base_url():
    mock_client = make_client({'bitcoin': {'usd': 1.0}})
    provider = CoinGeckoProvider(base_url='http://feed.local/api/', client=mock_client)

    await provider.fetch_rates(['bitcoin'], ['usd'])

    assert mock_client.get.call_args[0][0] == 'http://feed.local/api/simple/price'


@pytest.mark.asyncio
async def test_fetch_rates_omits_missing_assets():
    mock_client = make_client({
        'bitcoin': {'usd': 67012.5},
        'ethereum': {'usd': 3120.4},
    })
    provider = CoinGeckoProvider(client=mock_client)

    rates = await provider.fetch_rates(ASSETS, ['usd'])

    assert set(rates) == {'bitcoin', 'ethereum'}


@pytest.mark.asyncio
async def test_fetch_rates_ignores_unrequested_assets():
    mock_client = make_client({'bitcoin': {'usd': 1.0}, 'dogecoin': {'usd': 0.1}})
    provider = CoinGeckoProvider(client=mock_client)

    rates = await provider.fetch_rates(['bitcoin'], ['usd'])

    assert rates == {'bitcoin': {'usd': 1.0}}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    'payload',
    [
        {'bitcoin': 'not-a-mapping'},
        {'bitcoin': {'usd': 'abc'}},
        {'bitcoin': {'usd': -1.0}},
        ['bitcoin'],
    ],
)
async def test_fetch_rates_rejects_unexpected_payload(payload):
    provider = CoinGeckoProvider(client=make_client(payload))

    with pytest.raises(ProviderError):
        await provider.fetch_rates(['bitcoin'], ['usd'])


@pytest.mark.asyncio
async def test_fetch_rates_http_error():
    request = httpx.Request('GET', 'https://api.coingecko.com/api/v3/simple/price')
    response = httpx.Response(429, text='Too Many Requests', request=request)

    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_response = Mock()
    mock_response.raise_for_status.side_effect = httpx.HTTPStatusError(
        'rate limited', request=request, response=response
    )
    mock_client.get.return_value = mock_response

    provider = CoinGeckoProvider(client=mock_client)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_rates(ASSETS, FIATS)

    assert '429' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_rates_network_error():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.side_effect = httpx.ConnectError('Connection refused')

    provider = CoinGeckoProvider(client=mock_client)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_rates(ASSETS, FIATS)

    assert 'ConnectError' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_rates_invalid_json():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_response = Mock()
    mock_response.raise_for_status = Mock()
    mock_response.json.side_effect = ValueError('Expecting value')
    mock_client.get.return_value = mock_response

    provider = CoinGeckoProvider(client=mock_client)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_rates(ASSETS, FIATS)

    assert 'parsing error' in str(exc_info.value)


@pytest.mark.asyncio
async def test_close_closes_client():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    provider = CoinGeckoProvider(client=mock_client)

    await provider.close()

    mock_client.aclose.assert_awaited_once()


@pytest.mark.asyncio
async def test_fetch_rates_ignores_malformed_unrequested_asset():
    mock_client = make_client({
        'bitcoin': {'usd': 67012.5},
        'dogecoin': {'usd': 'not-a-number'},
        'tether': 'garbage',
    })
    provider = CoinGeckoProvider(client=mock_client)

    rates = await provider.fetch_rates(['bitcoin'], ['usd'])

    assert rates == {'bitcoin': {'usd': 67012.5}}
