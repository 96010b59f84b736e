# Databricks notebook source
# MAGIC %md
# MAGIC # CSAI-382 Week 2 – Relational Data with Baseball Salaries (Instructor Notebook)
# MAGIC
# MAGIC Welcome! This notebook walks through **relational data**: several tables that only make sense together. We use the Lahman baseball database stored in SQLite.
# MAGIC
# MAGIC **Learning objectives**
# MAGIC - Connect to a SQLite database and list its tables.
# MAGIC - Select columns and filter rows **in the database**, then collect into pandas.
# MAGIC - Aggregate player salaries into team payrolls (`groupby` + `sum`).
# MAGIC - Join on a **composite key** (`yearID` + `teamID`).
# MAGIC - Adjust money for inflation with a lookup table.
# MAGIC - Reshape postseason results from wide to long.
# MAGIC - Plot: bar chart, boxplot, and a scatterplot with a trend line.
# MAGIC
# MAGIC **Instructor Tip:** Draw the three tables on the board with arrows between the key columns before writing any code.
# COMMAND ----------
# MAGIC %md
# MAGIC ## 1. Setup & Connection
# MAGIC
# MAGIC Change `data_dir` before class. If the database is not there yet, the cell writes a small mock version.
# COMMAND ----------
import matplotlib.pyplot as plt

from eda_lessons import baseball, configure_logging, load_config, plots
from eda_lessons.loaders import connect_database, list_tables, load_inflation, query_table
from eda_lessons.sample_data import write_sample_files

# Instructor: set these to match your workspace
config = load_config(data_dir="data", log_dir="logs")
configure_logging(config.log_dir)
plots.configure_style()

if not config.baseball_path.exists():
    print("Database not found, writing mock data to", config.data_dir)
    write_sample_files(config.data_dir, config)

conn = connect_database(config.baseball_path)
print("Tables:", list_tables(conn))
# COMMAND ----------
# MAGIC %md
# MAGIC ## 2. Three Tables, Two Keys
# MAGIC
# MAGIC | Table | One row is… | Keys |
# MAGIC | --- | --- | --- |
# MAGIC | `Salaries` | one player's salary in one season | `yearID`, `teamID`, `playerID` |
# MAGIC | `Teams` | one team's season | `yearID`, `teamID` |
# MAGIC | `SeriesPost` | one postseason series | `yearID`, `round` |
# MAGIC
# MAGIC A team is only unique **inside a year**. `NYA` in 2014 and `NYA` in 2015 are different rows. That is why every join uses **both** `yearID` and `teamID`.
# COMMAND ----------
# MAGIC %md
# MAGIC ## 3. Select, Filter, Collect
# MAGIC
# MAGIC We let the database do the filtering. Only the rows we ask for come back into pandas.
# MAGIC
# MAGIC 💡 **Teaching Note:** Values go in `params`, never pasted into the SQL string.
# COMMAND ----------
first_year = 2000

salaries = query_table(
    conn,
    "Salaries",
    columns=["yearID", "teamID", "lgID", "playerID", "salary"],
    where="yearID >= ?",
    params=(first_year,),
)
teams = query_table(
    conn,
    "Teams",
    columns=["yearID", "lgID", "teamID", "name", "W", "L", "DivWin", "WCWin", "LgWin", "WSWin"],
    where="yearID >= ?",
    params=(first_year,),
)
series_post = query_table(conn, "SeriesPost", where="yearID >= ?", params=(first_year,))

print("Salaries:", salaries.shape, "Teams:", teams.shape, "SeriesPost:", series_post.shape)
salaries.head()
# COMMAND ----------
# BAD example: asking for a column that does not exist
try:
    query_table(conn, "Salaries", columns=["year", "salary"])
except Exception as e:
    print("🚨 Query error:", e)
# COMMAND ----------
# MAGIC %md
# MAGIC ## 4. From Salaries to Payroll (GroupBy + Sum)
# COMMAND ----------
payroll = baseball.team_payroll(salaries)
payroll.sort_values("payroll", ascending=False).head()
# COMMAND ----------
# MAGIC %md
# MAGIC ## 5. Adjusting for Inflation
# MAGIC
# MAGIC $1 in 2000 bought more than $1 in 2015. The lookup table gives one **multiplier** per year:
# MAGIC
# MAGIC `payroll_adj = payroll × multiplier`
# MAGIC
# MAGIC 🚨 **Common Mistake:** Joining on `teamID` only. The lookup has no team column, so the key is `yearID` ↔ `year`.
# COMMAND ----------
inflation = load_inflation(config.inflation_path)
payroll_adj = baseball.adjust_payroll(payroll, inflation)
payroll_adj.head()
# COMMAND ----------
# MAGIC %md
# MAGIC ## 6. Who Made the Playoffs? (Wide → Long)
# MAGIC
# MAGIC `SeriesPost` is **wide**: the winner and loser of a series sit in different columns of the same row. To ask "was this team in the postseason?" we reshape to **long**: one row per team per series.
# COMMAND ----------
series_post.head()
# COMMAND ----------
postseason = baseball.postseason_long(series_post)
postseason.head(8)
# COMMAND ----------
flagged = baseball.flag_playoffs(teams, series_post)
flagged[["yearID", "teamID", "W", "playoffs"]].head(10)
# COMMAND ----------
# MAGIC %md
# MAGIC The `Teams` table also has `Y`/`N` flag columns. We recode them to `1`/`0` so we can add them up.
# COMMAND ----------
for column in baseball.FLAG_COLUMNS:
    teams[f"{column}_num"] = baseball.yes_no_to_int(teams[column])
teams.groupby("yearID")[[f"{column}_num" for column in baseball.FLAG_COLUMNS]].sum()
# COMMAND ----------
# MAGIC %md
# MAGIC ## 7. One Row per Team-Season
# MAGIC
# MAGIC Now we put everything together: wins, payroll, adjusted payroll, and playoff flag.
# MAGIC
# MAGIC **Instructor Tip:** Ask: *"What happens to a team with no salary rows?"* (It drops out of an inner join. The log tells us how many.)
# COMMAND ----------
summary = baseball.season_summary(teams, salaries, series_post, inflation)
summary["payroll_adj_m"] = summary["payroll_adj"] / 1e6
summary.head()
# COMMAND ----------
champions = baseball.champion_payroll_ranks(summary)
print("Payroll rank of each World Series winner (1 = biggest payroll that year):")
champions
# COMMAND ----------
# MAGIC %md
# MAGIC ## 8. Charts
# COMMAND ----------
latest_year = int(summary["yearID"].max())
latest = summary[summary["yearID"] == latest_year].sort_values("payroll_adj_m", ascending=False)

fig, ax = plt.subplots(figsize=config.figure_size)
plots.bar_chart(latest, "teamID", "payroll_adj_m", title=f"Adjusted payroll, {latest_year}", ylabel="Payroll ($M)", ax=ax)
plt.show()
# COMMAND ----------
fig, ax = plt.subplots(figsize=config.figure_size)
plots.box_plot(summary, "playoffs", "payroll_adj_m", title="Payroll of playoff vs. other teams", ylabel="Payroll ($M)", ax=ax)
plt.show()
# COMMAND ----------
# MAGIC %md
# MAGIC ### Does money buy wins?
# MAGIC
# MAGIC The black line is a **linear fit** (least squares). The slope tells us how many extra wins one more million dollars is linked with.
# MAGIC
# MAGIC 🚨 **Common Mistake:** Reading the slope as cause and effect. Good teams may *earn* more money, too.
# COMMAND ----------
fit = baseball.fit_wins_on_payroll(summary)
print(f"Wins ≈ {fit['intercept']:.1f} + {fit['slope']:.3f} × payroll ($M),  r² = {fit['r2']:.2f},  n = {fit['n']}")

fig, ax = plt.subplots(figsize=config.figure_size)
plots.scatter_with_trend(summary, "payroll_adj_m", "W", hue="lgID", title="Wins vs. adjusted payroll", xlabel="Payroll ($M)", ax=ax)
plt.show()
# COMMAND ----------
conn.close()
# COMMAND ----------
# MAGIC %md
# MAGIC ## 9. Ethics Reflection
# MAGIC
# MAGIC - Salaries are about **real people**. Aggregating to team level is kinder than ranking individual players.
# MAGIC - An inflation multiplier is a choice. Write down which one you used and why.
# MAGIC
# MAGIC ## 10. Spiritual Thought
# MAGIC
# MAGIC A team is more than its payroll. Our worth is not measured by a salary number either.
# MAGIC
# MAGIC ## 11. Summary
# MAGIC
# MAGIC Today we:
# MAGIC - Queried SQLite with select + filter + collect
# MAGIC - Summed salaries into payrolls and adjusted them for inflation
# MAGIC - Joined on `yearID` + `teamID` and reshaped postseason results wide → long
# MAGIC - Compared payroll, playoffs, and wins with three charts
