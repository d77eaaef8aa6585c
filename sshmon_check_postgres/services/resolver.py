# sshmon_check_postgres/services/resolver.py
"""Host resolution through an alternate DNS server."""

import logging

import dns.asyncquery
import dns.exception
import dns.message
import dns.rdatatype

from sshmon_check_postgres.utils.constants import DEFAULT_DNS_PORT, DNS_TIMEOUT
from sshmon_check_postgres.utils.exceptions import ResolutionError

logger = logging.getLogger("sshmon_check_postgres.resolver")


def parse_server(server: str) -> tuple[str, int]:
    """Split a DNS server address into address and port.

    Accepts ``ip``, ``ip:port``, ``[ipv6]`` and ``[ipv6]:port``. A bare IPv6
    address (more than one colon, no brackets) carries no port.

    Args:
        server: Server address as given on the command line.

    Returns:
        A tuple of (address, port).
    """
    if server.startswith("["):
        address, _, rest = server[1:].partition("]")
        port = rest[1:] if rest.startswith(":") else ""
    elif server.count(":") == 1:
        address, _, port = server.partition(":")
    else:
        address, port = server, ""

    if not port:
        return address, DEFAULT_DNS_PORT
    try:
        return address, int(port)
    except ValueError:
        raise ValueError(f"invalid port in dns server address '{server}'") from None


async def resolve_host(
    host: str,
    server: str,
    timeout: float = DNS_TIMEOUT
) -> str:
    """Resolve the A record of a host via the given DNS server.

    Args:
        host: Hostname to resolve.
        server: DNS server address, optionally with port.
        timeout: Seconds to wait for the answer.

    Returns:
        The first IPv4 address of the answer section.

    Raises:
        ResolutionError: If the lookup fails or yields no A record.
    """
    try:
        address, port = parse_server(server)
        query = dns.message.make_query(host.rstrip(".") + ".", dns.rdatatype.A)
        response = await dns.asyncquery.udp(query, address, timeout=timeout, port=port)
    except (dns.exception.DNSException, OSError, ValueError) as e:
        raise ResolutionError(host, server, str(e) or type(e).__name__) from e

    for rrset in response.answer:
        if rrset.rdtype != dns.rdatatype.A:
            continue
        for rdata in rrset:
            logger.debug("Resolved %s via %s to %s", host, server, rdata.address)
            return rdata.address

    raise ResolutionError(host, server, "No results")
