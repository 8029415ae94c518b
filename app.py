import streamlit as st
import pandas as pd
import plotly.express as px

from components.index_stats import letter_distribution, summarize
from components.seed_words import build_seed_index
from tries.prefix_index import has_letters

# Configure page
st.set_page_config(
    page_title="Trie Auto-Suggest",
    page_icon="🔎",
    layout="wide",
    initial_sidebar_state="expanded"
)

# One index per browser session
if 'index' not in st.session_state:
    index, load_ms = build_seed_index()
    st.session_state['index'] = index
    st.session_state['load_ms'] = load_ms

index = st.session_state['index']

# Main title
st.title("🔎 Trie Auto-Suggest System")
st.markdown("---")

# Sidebar
with st.sidebar:
    st.header("Navigation")
    page = st.selectbox(
        "Choose a section:",
        ["Search", "Add Word", "Statistics", "Help"]
    )

    st.markdown("---")
    st.subheader("Quick Actions")
    if st.button("🔄 Reset Dictionary"):
        del st.session_state['index']
        st.rerun()

if page == "Search":
    st.header("Search for Suggestions")

    prefix = st.text_input(
        "Search prefix",
        value="",
        help="Leave empty to show every word. Search is case-insensitive."
    )

    suggestions = index.query(prefix)

    if suggestions:
        noun = "match" if len(suggestions) == 1 else "matches"
        st.success(f"✅ Found {len(suggestions)} {noun}")
        st.dataframe(
            pd.DataFrame({'Suggestion': suggestions}, index=range(1, len(suggestions) + 1))
        )
    else:
        st.error(f"❌ No suggestions found for \"{prefix}\"")
        st.info("Try a different prefix or check spelling.")

elif page == "Add Word":
    st.header("Add New Word")

    with st.form("add_word", clear_on_submit=True):
        word = st.text_input("New word")
        submitted = st.form_submit_button("Add")

    if submitted:
        if not word.strip(" \t\n\r"):
            st.error("❌ Cannot add empty word. Please try again.")
        elif not has_letters(word):
            st.error(f"❌ Cannot add \"{word}\": word must contain at least one letter (a-z).")
        else:
            before = index.count()
            index.insert(word)
            if index.count() > before:
                st.success(f"✅ Successfully added \"{word}\" to dictionary!")
                st.caption(f"Dictionary now contains {index.count()} words.")
            else:
                st.info(f"Word \"{word}\" already exists in dictionary.")

elif page == "Statistics":
    st.header("System Statistics")

    stats = summarize(index)

    col1, col2, col3, col4 = st.columns(4)

    with col1:
        st.metric("Total Words", stats['words'])

    with col2:
        st.metric("Trie Nodes", stats['nodes'])

    with col3:
        st.metric("Branching Factor", f"{stats['avg_branch_factor']:.2f}")

    with col4:
        st.metric("Load Time", f"{st.session_state['load_ms']:.3f} ms")

    dist = letter_distribution(index)
    if len(dist) > 0:
        fig = px.bar(dist, x='letter', y='words', title="Words by Initial Letter")
        fig.update_layout(xaxis_title="Initial letter", yaxis_title="Words")
        st.plotly_chart(fig)

        st.subheader("Word Length")
        st.dataframe(pd.DataFrame({
            'Statistic': ['Min', 'Max', 'Mean', 'Median'],
            'Length': [stats['length_min'], stats['length_max'],
                       stats['length_mean'], stats['length_median']],
        }))
    else:
        st.info("📁 Dictionary is empty")

elif page == "Help":
    st.header("Help & Documentation")

    st.markdown("""
    **How to Use:**
    - Enter any prefix to see matching words
    - Leave the prefix empty to display all words
    - Search is case-insensitive: "AP" = "ap"
    - Add words dynamically during the session

    **Complexity Analysis:**
    - Insert: `O(L)`, L = word length
    - Search: `O(L + K×M)`, K = results, M = avg length
    - Space: `O(N×M)`, N = words, M = avg length
    """)

# Footer
st.markdown("---")
st.markdown(
    """
    <div style='text-align: center; color: #B0B0B0; padding: 1rem;'>
        Built with Streamlit 🚀 | Trie Auto-Suggest
    </div>
    """,
    unsafe_allow_html=True
)
