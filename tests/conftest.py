"""Shared fixtures for the test suite."""

from pathlib import Path

import pytest

SAMPLE_XML = b"""<?xml version="1.0"?>
<doc>
    <assembly>
        <name>Shop.Api</name>
    </assembly>
    <members>
        <member name="T:Shop.Api.OrdersController">
            <summary>Handles   orders.</summary>
            <remarks>Talks to the order store.</remarks>
        </member>
        <member name="M:Shop.Api.OrdersController.#ctor(Shop.Api.IOrderStore)">
            <summary>Creates the controller.</summary>
            <param name="store">Order store.</param>
        </member>
        <member name="M:Shop.Api.OrdersController.Place(System.String,System.Int32)">
            <summary>Places an order for <paramref name="sku"/>.</summary>
            <param name="sku">Product code.</param>
            <param name="quantity">How many.</param>
            <returns cref="T:Shop.Api.Order">The new order.</returns>
            <exception cref="T:System.ArgumentException">Bad sku.</exception>
            <response code="201">Created.</response>
            <response code="abc">Broken.</response>
            <permission cref="P:Shop.Api.Permissions.CanOrder">fallback</permission>
            <uri method="post">/Orders</uri>
            <example>var o = c.Place("x", 1);</example>
        </member>
        <member name="P:Shop.Api.OrdersController.Count">
            <summary>Number of orders.</summary>
            <see cref="T:System.Int32"/>
        </member>
        <member name="F:Shop.Api.OrdersController.MaxItems">
            <summary>Largest order accepted.</summary>
        </member>
        <member name="E:Shop.Api.OrdersController.Placed">
            <summary>Raised after an order is placed.</summary>
        </member>
        <member name="T:Shop.Api.Permissions">
            <summary>Permission names.</summary>
        </member>
        <member name="P:Shop.Api.Permissions.CanOrder">
            <summary>May place orders.</summary>
        </member>
    </members>
</doc>
"""

NO_ASSEMBLY_XML = b"""<?xml version="1.0"?>
<doc>
    <members>
        <member name="T:Shop.Logic.Pricing">
            <summary>Computes prices.</summary>
        </member>
        <member name="M:Shop.Logic.Pricing.Quote(System.Decimal)">
            <param name="amount">Base amount.</param>
        </member>
    </members>
</doc>
"""


@pytest.fixture
def sample_xml() -> bytes:
    """Documentation of a small API assembly."""
    return SAMPLE_XML


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """The sample documentation written to disk."""
    path = tmp_path / "Shop.Api.xml"
    path.write_bytes(SAMPLE_XML)
    return path


@pytest.fixture
def logic_file(tmp_path: Path) -> Path:
    """A documentation file without an assembly name."""
    path = tmp_path / "Shop.Logic.xml"
    path.write_bytes(NO_ASSEMBLY_XML)
    return path
