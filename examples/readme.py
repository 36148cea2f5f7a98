from graphql import ExecutionResult, graphql_sync

import rivet

TYPES = """
type Person {
  name: String!
  title: String
}

type Query {
  person(name: String!): Person
}

type Mutation {
  addPerson(name: String!, title: String): Person
}
"""

PEOPLE = {"Ada": {"name": "Ada", "title": "Countess"}}


def person(root, info, name):
    return PEOPLE.get(name)


async def add_person(root, info, name, title=None):
    return {"name": name, "title": title}


schema = rivet.make_schema(
    {
        "types": TYPES,
        "query": {"person": person},
        "mutation": {"addPerson": add_person},
    }
)


def run_query() -> ExecutionResult:
    return graphql_sync(schema, '{ person(name: "Ada") { name title } }')


def run_mutation() -> ExecutionResult:
    return graphql_sync(schema, 'mutation { addPerson(name: "Gromit") { name title } }')


if __name__ == "__main__":
    print(run_query())
    print(run_mutation())
