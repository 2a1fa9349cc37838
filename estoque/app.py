import streamlit as st

from estoque.api.client import ApiClient
from estoque.config import API_BASE, configure_logging, settings
from estoque.render import format_price, format_stock, products_csv
from estoque.token_store import LocalStorage, StorageTokenProvider
from estoque.view import DELETE_CONFIRMATION, InventoryView

st.set_page_config(
    page_title="Estoque de Produtos",
    layout="wide"
)


def build_view() -> InventoryView:
    configure_logging()
    client = ApiClient(
        API_BASE,
        StorageTokenProvider(LocalStorage(settings.token_file)),
    )
    view = InventoryView(client)
    view.load()
    return view


# Loaded once per browser session
if "inventory_view" not in st.session_state:
    st.session_state["inventory_view"] = build_view()
if "form_version" not in st.session_state:
    st.session_state["form_version"] = 0

view: InventoryView = st.session_state["inventory_view"]

st.header("📦 Estoque de Produtos")


# ---------------- Banners ----------------
@st.fragment(run_every=settings.banner_poll_seconds)
def banners():
    view.tick()
    if view.state.error:
        st.error(view.state.error)
    if view.state.success:
        st.success(view.state.success)


banners()

# ---------------- Search ----------------
query = st.text_input(
    "Pesquisar produto",
    placeholder="Pesquisar produto",
    key="search",
    label_visibility="collapsed",
)
view.set_search(query)

# ---------------- Create Product ----------------
st.subheader("➕ Adicionar Novo Produto")

version = st.session_state["form_version"]
draft = view.state.draft

with st.form("create_product_form"):
    name = st.text_input("Nome do Produto", value=draft.name, key=f"name-{version}")
    description = st.text_input("Descrição", value=draft.description, key=f"description-{version}")
    price = st.text_input("Preço", value=draft.price, key=f"price-{version}")
    stock = st.text_input("Estoque", value=draft.stock, key=f"stock-{version}")
    submitted = st.form_submit_button("Adicionar Produto", key="add-product")

if submitted:
    view.update_draft("name", name)
    view.update_draft("description", description)
    view.update_draft("price", price)
    view.update_draft("stock", stock)

    missing = view.state.draft.missing_fields()
    invalid = view.state.draft.invalid_fields()
    if missing:
        st.warning("Preencha os campos obrigatórios: " + ", ".join(missing))
    elif invalid:
        st.warning("Informe um número válido em: " + ", ".join(invalid))
    elif view.add_product():
        st.session_state["form_version"] = version + 1
        st.rerun()
    else:
        st.rerun()

# ---------------- Product List ----------------
st.divider()

pending = view.state.pending_delete
if pending is not None:
    st.warning(DELETE_CONFIRMATION)
    confirm_col, cancel_col = st.columns(2)
    confirm_col.button("Confirmar", key="confirm-delete", on_click=view.confirm_delete, type="primary")
    cancel_col.button("Cancelar", key="cancel-delete", on_click=view.cancel_delete)

products = view.visible_products()

if not products:
    st.info("Nenhum produto encontrado.")
    st.stop()

for product in products:
    with st.container(border=True):
        info_col, action_col = st.columns([5, 1])
        info_col.markdown(f"**{product.name}**")
        if product.description:
            info_col.caption(product.description)
        info_col.write(f"Preço: {format_price(product.price)}")
        info_col.write(f"Estoque: {format_stock(product.stock)}")
        action_col.button(
            "Excluir",
            key=f"delete-{product.id}",
            on_click=view.request_delete,
            args=(product.id,),
        )

# ---------------- Export ----------------
st.download_button(
    label="Exportar CSV",
    data=products_csv(products),
    file_name="estoque.csv",
    mime="text/csv"
)
