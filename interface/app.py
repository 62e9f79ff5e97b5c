# interface/app.py
"""
Depot Dashboard - Main Application

Streamlit interface over an in-session DepotStore: inventory upload and
editing, requisition accept/reject, analytics and license documents.
"""

import pandas as pd
import streamlit as st

from config import CURRENCY, configure_logging
from interface.processor import process_uploaded_file
from store import (
    DepotStore,
    average_order_value,
    build_invoice,
    dashboard_summary,
    format_invoice_text,
    recent_requisitions,
    top_medicines,
)

configure_logging()

# ============================================================================
# PAGE CONFIG
# ============================================================================
st.set_page_config(
    page_title="Depot Dashboard",
    page_icon="💊",
    layout="wide",
)

# ============================================================================
# SESSION STATE INITIALIZATION
# ============================================================================
if "store" not in st.session_state:
    st.session_state.store = DepotStore.seeded()

store: DepotStore = st.session_state.store

page = st.sidebar.radio("Navigate", ["Dashboard", "Inventory", "Requests", "Analytics", "Verification"])


def _render_dashboard() -> None:
    summary = dashboard_summary(store)

    st.title("Dashboard")
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Total Stock Items", f"{summary.total_units:,.0f}", f"{summary.product_count} products")
    c2.metric("Inventory Value", f"{summary.total_value / 1_000_000:.1f}M {CURRENCY}")
    c3.metric("Pending Requests", summary.pending_requests)
    c4.metric("Accepted Requests", summary.accepted_requests)

    recent_col, low_col = st.columns(2)

    with recent_col:
        st.subheader("Recent Requests")
        for req in recent_requisitions(store.requisitions):
            name_col, amount_col = st.columns([3, 2])
            name_col.markdown(f"**{req['pharmacyName']}**")
            name_col.caption(f"{len(req['items'])} items · {req['requestDate']}")
            amount_col.markdown(f"{req['totalAmount']:,.0f} {CURRENCY} · `{req['status']}`")

    with low_col:
        st.subheader("Low stock")
        if summary.low_stock:
            st.dataframe(pd.DataFrame(summary.low_stock), hide_index=True)
        else:
            st.caption("All products are above the low-stock threshold.")


def _render_inventory() -> None:
    st.title("Inventory Management")

    uploaded = st.file_uploader("Upload inventory (.csv, .xlsx, .xls)", type=["csv", "xlsx", "xlsm", "xls"], key="inventory_upload")
    if uploaded and st.button("Import inventory", type="primary"):
        with st.spinner("Importing..."):
            outcome = process_uploaded_file(uploaded, "inventory", store)
        if outcome.success:
            st.success(f"✅ {outcome.message}")
        else:
            st.error(f"❌ {outcome.message}")

    with st.expander("Bulk price update"):
        pct = st.number_input("Change all prices by (%)", value=0.0, step=1.0)
        if st.button("Apply") and pct:
            store.bulk_update_prices(pct)
            st.success(f"All prices {'increased' if pct > 0 else 'decreased'} by {abs(pct):g}%")

    query = st.text_input("Search by name or category")
    items = store.search_inventory(query)
    if not items:
        st.info("No products found.")
        return

    df = pd.DataFrame(items)
    edited = st.data_editor(
        df,
        hide_index=True,
        disabled=["id", "name", "category", "unit", "expiryDate"],
        key="inventory_editor",
    )

    # ------------------------------------------------------------------------
    # PERSIST PRICE / QUANTITY EDITS
    # ------------------------------------------------------------------------
    for before, after in zip(df.to_dict(orient="records"), edited.to_dict(orient="records")):
        changes = {k: after[k] for k in ("unitPrice", "quantity") if after[k] != before[k]}
        if changes:
            store.update_inventory_item(before["id"], **changes)


def _render_requests() -> None:
    st.title("Incoming Requests")

    uploaded = st.file_uploader("Upload requisition (.csv, .xlsx, .xls)", type=["csv", "xlsx", "xlsm", "xls"], key="requisition_upload")
    if uploaded and st.button("Create requisition", type="primary"):
        with st.spinner("Importing..."):
            outcome = process_uploaded_file(uploaded, "requisition", store)
        if outcome.success:
            st.success(f"✅ {outcome.message}")
        else:
            st.error(f"❌ {outcome.message}")

    tabs = st.tabs(
        [
            f"Pending ({len(store.requisitions_by_status('pending'))})",
            f"Accepted ({len(store.requisitions_by_status('accepted'))})",
            f"Rejected ({len(store.requisitions_by_status('rejected'))})",
        ]
    )
    for tab, status in zip(tabs, ("pending", "accepted", "rejected")):
        with tab:
            reqs = store.requisitions_by_status(status)
            if not reqs:
                st.caption("No requests found")
            for req in reqs:
                with st.container(border=True):
                    st.markdown(f"**{req['pharmacyName']}** · {req['pharmacyContact']} · {req['requestDate']}")
                    st.dataframe(pd.DataFrame(req["items"]), hide_index=True)
                    st.write(f"Total: {req['totalAmount']:,.0f} {CURRENCY}")
                    if req["momoCode"]:
                        st.caption(f"MoMo code: {req['momoCode']}")

                    if status == "accepted":
                        _render_invoice(req)

                    if status == "pending":
                        code = st.text_input("MoMo payment code", key=f"momo_{req['id']}")
                        accept_col, reject_col = st.columns(2)
                        if accept_col.button("Accept", key=f"accept_{req['id']}"):
                            try:
                                store.accept_requisition(req["id"], code)
                            except ValueError as e:
                                st.error(str(e))
                            else:
                                st.rerun()
                        if reject_col.button("Reject", key=f"reject_{req['id']}"):
                            store.reject_requisition(req["id"])
                            st.rerun()


def _render_invoice(req) -> None:
    invoice = build_invoice(req)

    with st.expander("Invoice"):
        id_col, bill_col = st.columns(2)
        id_col.markdown(f"**Invoice** `{invoice.id}`")
        id_col.caption(invoice.date)
        bill_col.markdown(f"**Bill To:** {invoice.pharmacy_name}")
        bill_col.caption(invoice.pharmacy_contact)

        st.dataframe(
            pd.DataFrame(
                [(line.name, line.quantity, line.unit_price, line.line_total) for line in invoice.lines],
                columns=["Item", "Qty", "Price", "Total"],
            ),
            hide_index=True,
        )
        st.markdown(f"MoMo Code: `{invoice.momo_code}` · **Total Amount: {invoice.total:,.0f} {CURRENCY}**")

        st.download_button(
            label="🖨️ Download printable invoice",
            data=format_invoice_text(invoice),
            file_name=f"invoice-{invoice.id}.txt",
            mime="text/plain",
            key=f"invoice_{invoice.id}",
        )


def _render_analytics() -> None:
    st.title("Analytics")

    c1, c2 = st.columns(2)
    c1.metric("Total Orders", len(store.requisitions))
    c2.metric("Average Order Value", f"{average_order_value(store.requisitions):,} {CURRENCY}")

    top = top_medicines(store.requisitions)
    if top:
        st.subheader("Top requested medicines")
        st.bar_chart(pd.DataFrame(top, columns=["medicine", "quantity"]).set_index("medicine"))


def _render_verification() -> None:
    st.title("Verification")

    doc = st.file_uploader("Upload license document", type=["pdf", "png", "jpg", "jpeg"], key="license_upload")
    if doc and st.button("Upload document"):
        store.add_license(doc.name)
        st.success("Document uploaded successfully")

    st.dataframe(pd.DataFrame(store.licenses), hide_index=True)


# ============================================================================
# MAIN APP FLOW
# ============================================================================
{
    "Dashboard": _render_dashboard,
    "Inventory": _render_inventory,
    "Requests": _render_requests,
    "Analytics": _render_analytics,
    "Verification": _render_verification,
}[page]()
