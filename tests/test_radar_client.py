import httpx
import pytest

from radarclient.client import BASE_URL, RadarClient
from wui.api import Coordinates
from wui.config import HttpSettings
from wui.errors import ConfigurationError, InvalidArgument, TransportError, UpstreamError


def test_geocode_ip(recorder):
    rec = recorder(json_data={"ip": "1.2.3.4", "address": {"latitude": 10.0, "longitude": 20.0}})
    c = rec.install(RadarClient(api_key='prj_test'))
    assert c.geocode_ip() == Coordinates(latitude=10.0, longitude=20.0)
    req = rec.requests[0]
    assert str(req.url) == f"{BASE_URL}/geocode/ip"
    assert req.headers['Authorization'] == 'prj_test'


def test_geocode_ip_missing_address(recorder):
    rec = recorder(json_data={"meta": {"code": 200}})
    c = rec.install(RadarClient(api_key='k'))
    with pytest.raises(UpstreamError, match='address'):
        c.geocode_ip()


def test_geocode_ip_address_without_coordinates(recorder):
    rec = recorder(json_data={"address": {"city": "Oxford"}})
    c = rec.install(RadarClient(api_key='k'))
    with pytest.raises(UpstreamError, match='latitude/longitude'):
        c.geocode_ip()


def test_geocode_ip_non_200(recorder):
    rec = recorder(status_code=403, json_data={"meta": {"code": 403, "message": "Forbidden"}})
    c = rec.install(RadarClient(api_key='k'))
    with pytest.raises(UpstreamError) as exc:
        c.geocode_ip()
    assert '403' in str(exc.value)


def test_geocode_takes_first_address(recorder):
    rec = recorder(json_data={"addresses": [
        {"latitude": 39.5, "longitude": -84.7, "confidence": "exact"},
        {"latitude": 51.7, "longitude": -1.2, "confidence": "fallback"},
    ]})
    c = rec.install(RadarClient(api_key='k'))
    assert c.geocode('Oxford') == Coordinates(39.5, -84.7)
    req = rec.requests[0]
    assert req.url.path == '/v1/geocode/forward'
    assert req.url.params['query'] == 'Oxford'
    assert req.url.params['limit'] == '1'
    assert req.headers['Authorization'] == 'k'


@pytest.mark.parametrize('query', ['', '   '])
def test_geocode_empty_query(recorder, query):
    rec = recorder(json_data={"addresses": []})
    c = rec.install(RadarClient(api_key='k'))
    with pytest.raises(InvalidArgument):
        c.geocode(query)
    assert rec.calls == 0


def test_geocode_no_addresses(recorder):
    rec = recorder(json_data={"addresses": []})
    c = rec.install(RadarClient(api_key='k'))
    with pytest.raises(UpstreamError, match='no addresses'):
        c.geocode('Atlantis')


def test_geocode_non_200(recorder):
    rec = recorder(status_code=500, text='internal error')
    c = rec.install(RadarClient(api_key='k'))
    with pytest.raises(UpstreamError) as exc:
        c.geocode('Oxford')
    assert '500' in str(exc.value)
    assert exc.value.body == 'internal error'


def test_empty_api_key():
    with pytest.raises(ConfigurationError):
        RadarClient(api_key='')


@pytest.mark.parametrize('addresses', [{"a": 1}, 5, "Oxford"])
def test_geocode_addresses_not_a_list(recorder, addresses):
    rec = recorder(json_data={"addresses": addresses})
    c = rec.install(RadarClient(api_key='k'))
    with pytest.raises(UpstreamError, match='not a list'):
        c.geocode('Oxford')


def test_geocode_ip_transport_error(recorder):
    rec = recorder(exc=httpx.ConnectError)
    c = rec.install(RadarClient(api_key='k'))
    with pytest.raises(TransportError):
        c.geocode_ip()
    assert rec.calls == 1


def test_timeout_applied():
    c = RadarClient('k', http=HttpSettings(timeout=5))
    assert c._client.timeout.read == 5
    assert c._client.timeout.connect == 5
    c.close()


def test_default_timeout():
    with RadarClient('k') as c:
        assert c._client.timeout.read == 30.0


def test_context_manager_closes():
    with RadarClient('k') as c:
        assert not c._client.is_closed
    assert c._client.is_closed


def test_options_are_keyword_only():
    with pytest.raises(TypeError):
        RadarClient('k', HttpSettings())
